from .chat_relay_service import ChatRelayService
from .document_store import DocumentStore
from .embedding_service import EmbeddingService
from .ingestion_service import DocumentIngestionService
from .retrieval_service import RetrievalService

__all__ = [
    "ChatRelayService",
    "DocumentStore",
    "EmbeddingService",
    "DocumentIngestionService",
    "RetrievalService",
]
