"""Document endpoints — upload, clear, and inspect the loaded document."""

import logging

from fastapi import APIRouter, Depends, HTTPException, UploadFile, status

from learnplay.application.schemas import (
    ClearResponse,
    DocumentStatusResponse,
    UploadResponse,
)
from learnplay.application.services import DocumentIngestionService, DocumentStore
from learnplay.config import get_settings
from learnplay.domain.exceptions import (
    InvalidRequestError,
    UnsupportedFileTypeError,
    UpstreamServiceError,
)
from learnplay.infrastructure.dependencies import get_document_store, get_ingestion_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Documents"])


@router.post("/upload", response_model=UploadResponse)
async def upload_document(
    file: UploadFile,
    service: DocumentIngestionService = Depends(get_ingestion_service),
) -> UploadResponse:
    """Replace the loaded document with an uploaded PDF, DOCX, or text file."""
    content = await file.read()
    if not content:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Uploaded file is empty")

    max_bytes = get_settings().max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"File exceeds {get_settings().max_upload_size_mb} MB",
        )

    mime_type = file.content_type or "application/octet-stream"
    try:
        snapshot = await service.ingest_upload(content, mime_type, file.filename)
    except UnsupportedFileTypeError as e:
        raise HTTPException(status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE, detail=e.message)
    except InvalidRequestError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except UpstreamServiceError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"[{e.provider}] {e.message}",
        )

    return UploadResponse(ok=True, chunks=snapshot.chunk_count)


@router.post("/clear", response_model=ClearResponse)
async def clear_document(
    store: DocumentStore = Depends(get_document_store),
) -> ClearResponse:
    """Forget the loaded document."""
    await store.clear()
    return ClearResponse(ok=True)


@router.get("/document", response_model=DocumentStatusResponse)
async def document_status(
    store: DocumentStore = Depends(get_document_store),
) -> DocumentStatusResponse:
    snapshot = store.current()
    if snapshot is None:
        return DocumentStatusResponse(loaded=False, version=store.version)
    return DocumentStatusResponse(
        loaded=True,
        chunks=snapshot.chunk_count,
        version=snapshot.version,
        source=snapshot.source_name,
        embedding_model=snapshot.embedding_model,
    )
