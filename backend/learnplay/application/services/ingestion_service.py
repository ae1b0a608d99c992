"""Document ingestion — extract text from an upload and hand it to retrieval."""

import logging

from learnplay.application.interfaces.text_extractor import TextExtractor
from learnplay.application.services.retrieval_service import RetrievalService
from learnplay.domain.entities import DocumentSnapshot
from learnplay.domain.exceptions import UnsupportedFileTypeError
from learnplay.infrastructure.logging.colored_logger import PipelineLogger, PipelineStage

logger = logging.getLogger(__name__)
plog = PipelineLogger("DocumentIngestionService")


class DocumentIngestionService:
    """Upload pipeline: extract → chunk → embed → replace the loaded document."""

    def __init__(self, text_extractor: TextExtractor, retrieval_service: RetrievalService):
        self._extractor = text_extractor
        self._retrieval = retrieval_service

    async def ingest_upload(
        self,
        content: bytes,
        mime_type: str,
        filename: str | None = None,
    ) -> DocumentSnapshot:
        plog.separator(f"Processing: {filename or 'upload'}")
        plog.step_start(
            PipelineStage.UPLOAD,
            f"Received '{filename}'",
            size_bytes=len(content),
            mime_type=mime_type,
        )

        if not self._extractor.supports(mime_type):
            plog.step_error(PipelineStage.ERROR, f"Rejected '{filename}' ({mime_type})")
            raise UnsupportedFileTypeError(mime_type, filename)

        with plog.timed_step(PipelineStage.TEXT_EXTRACTION, "Extracting text"):
            text = await self._extractor.extract(content, mime_type, filename)
        plog.detail("Extracted text", characters=len(text))

        snapshot = await self._retrieval.ingest(text, source_name=filename)

        plog.step_complete(
            PipelineStage.COMPLETE,
            f"Loaded '{filename}'",
            chunks=snapshot.chunk_count,
            version=snapshot.version,
        )
        return snapshot
