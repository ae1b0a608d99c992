"""Pydantic schemas for document upload and status."""

from pydantic import BaseModel


class UploadResponse(BaseModel):
    """Returned after a document has been chunked and embedded."""

    ok: bool = True
    chunks: int


class ClearResponse(BaseModel):
    ok: bool = True


class DocumentStatusResponse(BaseModel):
    """Describes the currently loaded document, if any."""

    loaded: bool
    chunks: int = 0
    version: int
    source: str | None = None
    embedding_model: str | None = None
