"""Multi-format text extractor — extracts text from PDF, DOCX, and plain text uploads."""

import io
import logging

from learnplay.application.interfaces.text_extractor import TextExtractor
from learnplay.domain.exceptions import InvalidRequestError, UnsupportedFileTypeError

logger = logging.getLogger(__name__)

DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


class MultiFormatTextExtractor(TextExtractor):
    """Infrastructure adapter that extracts text from in-memory uploads.

    - PDF: PyMuPDF (fitz)
    - DOCX: python-docx
    - TXT: built-in
    """

    # Format → handler method mapping
    _HANDLERS: dict[str, str] = {
        "application/pdf": "_extract_pdf",
        DOCX_MIME_TYPE: "_extract_docx",
        "text/plain": "_extract_text",
    }

    def supports(self, mime_type: str) -> bool:
        return self._normalize(mime_type) in self._HANDLERS

    async def extract(self, data: bytes, mime_type: str, filename: str | None = None) -> str:
        """Extract text from ``data``.

        Raises:
            UnsupportedFileTypeError: If the MIME type has no handler.
            InvalidRequestError: If the bytes cannot be parsed as that type.
        """
        handler_name = self._HANDLERS.get(self._normalize(mime_type))
        if handler_name is None:
            raise UnsupportedFileTypeError(mime_type, filename)

        handler = getattr(self, handler_name)
        try:
            text = await handler(data)
        except Exception as e:
            logger.warning("Failed to parse %s (%s): %s", filename or "upload", mime_type, e)
            raise InvalidRequestError(f"Could not read {filename or 'upload'}: {e}") from e

        logger.info(
            "Extracted %d characters from %s (%s)",
            len(text),
            filename or "upload",
            mime_type,
        )
        return text

    @staticmethod
    def _normalize(mime_type: str) -> str:
        """Drop parameters such as '; charset=utf-8'."""
        return mime_type.split(";", 1)[0].strip().lower()

    # ── Format-specific handlers ─────────────────────────────────────

    async def _extract_pdf(self, data: bytes) -> str:
        """Extract text from PDF using PyMuPDF."""
        import fitz  # PyMuPDF

        pages: list[str] = []
        with fitz.open(stream=data, filetype="pdf") as doc:
            for page_num, page in enumerate(doc):
                text = page.get_text("text")
                if text.strip():
                    pages.append(text)
                else:
                    logger.debug("Page %d has no text layer", page_num + 1)

        if not pages:
            logger.warning("PDF has no extractable text — scanned documents are not supported")
            return ""

        return "\n\n".join(pages)

    async def _extract_docx(self, data: bytes) -> str:
        """Extract text from DOCX using python-docx."""
        from docx import Document

        doc = Document(io.BytesIO(data))
        parts: list[str] = []

        for para in doc.paragraphs:
            if para.text.strip():
                parts.append(para.text)

        for table in doc.tables:
            for row in table.rows:
                cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
                if cells:
                    parts.append(" | ".join(cells))

        return "\n".join(parts)

    async def _extract_text(self, data: bytes) -> str:
        """Decode plain text, trying UTF-8 first then latin-1."""
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError:
            return data.decode("latin-1")
