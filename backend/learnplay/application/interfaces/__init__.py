from .chat_provider import ChatProvider
from .embedding_provider import EmbeddingProvider
from .text_extractor import TextExtractor

__all__ = [
    "ChatProvider",
    "EmbeddingProvider",
    "TextExtractor",
]
