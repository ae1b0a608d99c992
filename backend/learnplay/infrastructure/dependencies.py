"""FastAPI dependency injection — wires infrastructure to application layer."""

from functools import lru_cache

from fastapi import Depends

from learnplay.config import get_settings
from learnplay.application.interfaces import ChatProvider, EmbeddingProvider, TextExtractor
from learnplay.application.services import (
    ChatRelayService,
    DocumentIngestionService,
    DocumentStore,
    EmbeddingService,
    RetrievalService,
)
from learnplay.infrastructure.extractors.multi_format_text_extractor import MultiFormatTextExtractor
from learnplay.infrastructure.ollama import OllamaChatClient, OllamaEmbeddingProvider


@lru_cache
def get_document_store() -> DocumentStore:
    """Process-wide document session — one loaded document per server."""
    return DocumentStore()


def get_chat_provider() -> ChatProvider:
    """Provides the Ollama chat adapter."""
    settings = get_settings()
    return OllamaChatClient(
        base_url=settings.ollama_url,
        model=settings.ollama_model,
        timeout=settings.upstream_timeout,
    )


def get_embedding_provider() -> EmbeddingProvider:
    """Provides the Ollama embedding adapter."""
    settings = get_settings()
    return OllamaEmbeddingProvider(
        base_url=settings.ollama_url,
        model=settings.embedding_model,
        timeout=settings.upstream_timeout,
    )


def get_text_extractor() -> TextExtractor:
    return MultiFormatTextExtractor()


def get_embedding_service(
    provider: EmbeddingProvider = Depends(get_embedding_provider),
) -> EmbeddingService:
    settings = get_settings()
    return EmbeddingService(provider, max_concurrency=settings.embedding_concurrency)


def get_retrieval_service(
    embedding_service: EmbeddingService = Depends(get_embedding_service),
    store: DocumentStore = Depends(get_document_store),
) -> RetrievalService:
    """Provides a RetrievalService bound to the shared document store."""
    settings = get_settings()
    return RetrievalService(
        embedding_service,
        store,
        chunk_size=settings.chunk_size,
        chunk_overlap=settings.chunk_overlap,
    )


def get_ingestion_service(
    extractor: TextExtractor = Depends(get_text_extractor),
    retrieval_service: RetrievalService = Depends(get_retrieval_service),
) -> DocumentIngestionService:
    return DocumentIngestionService(extractor, retrieval_service)


def get_chat_relay_service(
    provider: ChatProvider = Depends(get_chat_provider),
    retrieval_service: RetrievalService = Depends(get_retrieval_service),
) -> ChatRelayService:
    """Provides a ChatRelayService with Ollama as the default provider."""
    return ChatRelayService(provider, retrieval_service)
