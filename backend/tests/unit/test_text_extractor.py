"""Unit tests for the MultiFormatTextExtractor."""

import io

import pytest

from learnplay.domain.exceptions import InvalidRequestError, UnsupportedFileTypeError
from learnplay.infrastructure.extractors.multi_format_text_extractor import (
    DOCX_MIME_TYPE,
    MultiFormatTextExtractor,
)


@pytest.fixture
def extractor():
    return MultiFormatTextExtractor()


def test_supported_types(extractor):
    assert extractor.supports("application/pdf")
    assert extractor.supports(DOCX_MIME_TYPE)
    assert extractor.supports("text/plain")
    assert extractor.supports("text/plain; charset=utf-8")
    assert not extractor.supports("image/png")
    assert not extractor.supports("application/zip")


@pytest.mark.asyncio
async def test_extract_plain_text(extractor):
    text = await extractor.extract("Cells are small.\nVery small.".encode(), "text/plain", "cells.txt")
    assert text == "Cells are small.\nVery small."


@pytest.mark.asyncio
async def test_extract_plain_text_latin1_fallback(extractor):
    text = await extractor.extract("café".encode("latin-1"), "text/plain")
    assert text == "café"


@pytest.mark.asyncio
async def test_extract_docx(extractor):
    from docx import Document

    doc = Document()
    doc.add_paragraph("Photosynthesis happens in chloroplasts.")
    doc.add_paragraph("   ")
    table = doc.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "Input"
    table.rows[0].cells[1].text = "Light"
    buffer = io.BytesIO()
    doc.save(buffer)

    text = await extractor.extract(buffer.getvalue(), DOCX_MIME_TYPE, "bio.docx")

    assert "Photosynthesis happens in chloroplasts." in text
    assert "Input | Light" in text


@pytest.mark.asyncio
async def test_extract_pdf(extractor):
    import fitz

    doc = fitz.open()
    page = doc.new_page()
    page.insert_text((72, 72), "Mitochondria produce ATP.")
    data = doc.tobytes()
    doc.close()

    text = await extractor.extract(data, "application/pdf", "bio.pdf")

    assert "Mitochondria produce ATP." in text


@pytest.mark.asyncio
async def test_unsupported_type_raises(extractor):
    with pytest.raises(UnsupportedFileTypeError) as exc_info:
        await extractor.extract(b"\x89PNG", "image/png", "diagram.png")

    assert exc_info.value.mime_type == "image/png"
    assert "diagram.png" in exc_info.value.message


@pytest.mark.asyncio
@pytest.mark.parametrize("mime_type", ["application/pdf", DOCX_MIME_TYPE])
async def test_corrupt_document_raises_invalid_request(extractor, mime_type):
    with pytest.raises(InvalidRequestError) as exc_info:
        await extractor.extract(b"not a real document", mime_type, "broken.bin")

    assert "broken.bin" in exc_info.value.message
