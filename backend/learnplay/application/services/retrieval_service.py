"""Retrieval service — chunk + embed a document, then rank it against queries."""

import logging

from learnplay.application.services.chunking import (
    DEFAULT_CHUNK_OVERLAP,
    DEFAULT_CHUNK_SIZE,
    chunk_text,
)
from learnplay.application.services.document_store import DocumentStore
from learnplay.application.services.embedding_service import EmbeddingService
from learnplay.application.services.similarity import build_context, rank_chunks
from learnplay.domain.entities import DocumentSnapshot, RetrievalResult
from learnplay.domain.exceptions import InvalidRequestError, NoDocumentError
from learnplay.infrastructure.logging.colored_logger import PipelineLogger, PipelineStage

logger = logging.getLogger(__name__)
plog = PipelineLogger("RetrievalService")


class RetrievalService:
    """Builds the in-memory document and answers similarity queries against it."""

    def __init__(
        self,
        embedding_service: EmbeddingService,
        document_store: DocumentStore,
        *,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        chunk_overlap: int = DEFAULT_CHUNK_OVERLAP,
    ):
        self._embedding_service = embedding_service
        self._store = document_store
        self._chunk_size = chunk_size
        self._chunk_overlap = chunk_overlap

    async def ingest(self, text: str, source_name: str | None = None) -> DocumentSnapshot:
        """Replace the loaded document with ``text``.

        The store is only touched once every chunk has been embedded, so a
        failed upload leaves the previous document in place.
        """
        chunks = chunk_text(text, self._chunk_size, self._chunk_overlap)
        plog.step_complete(
            PipelineStage.CHUNKING,
            f"Split {len(text)} characters",
            chunks=len(chunks),
            size=self._chunk_size,
            overlap=self._chunk_overlap,
        )
        if not chunks:
            raise InvalidRequestError("Document contains no extractable text")

        with plog.timed_step(PipelineStage.EMBEDDING, f"Embedding {len(chunks)} chunks"):
            embeddings = await self._embedding_service.embed_texts(chunks)

        return await self._store.replace(
            chunks,
            embeddings,
            embedding_model=self._embedding_service.model,
            source_name=source_name,
        )

    async def retrieve(self, query: str) -> RetrievalResult:
        """Rank the loaded document's chunks against ``query``.

        Raises:
            NoDocumentError: If no document is loaded.
            EmbeddingError: If the query cannot be embedded.
        """
        snapshot = self._store.current()
        if snapshot is None:
            raise NoDocumentError()

        query_embedding = await self._embedding_service.embed_query(query)
        ranked = rank_chunks(query_embedding, snapshot.embeddings)
        context = build_context(snapshot.chunks, ranked)

        plog.step_complete(
            PipelineStage.RETRIEVAL,
            f"Selected {len(ranked)} of {snapshot.chunk_count} chunks",
            version=snapshot.version,
            best=f"{ranked[0].score:.3f}" if ranked else "n/a",
        )
        return RetrievalResult(
            query=query,
            context=context,
            ranked=ranked,
            document_version=snapshot.version,
        )

    def current_document(self) -> DocumentSnapshot | None:
        return self._store.current()

    async def clear(self) -> None:
        await self._store.clear()
