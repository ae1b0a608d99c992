"""Ollama infrastructure package."""

from .ollama_client import OllamaChatClient
from .ollama_embedding_provider import OllamaEmbeddingProvider

__all__ = ["OllamaChatClient", "OllamaEmbeddingProvider"]
