import io

import pytest
from docx import Document

from services.document_parser import (
    DOCX_TYPE,
    PDF_TYPE,
    clean_text,
    extract_from_bytes,
    extract_text_docx,
    resolve_content_type,
)


def _make_docx(paragraphs: list[str], table: list[list[str]] | None = None) -> bytes:
    doc = Document()
    for p in paragraphs:
        doc.add_paragraph(p)
    if table:
        t = doc.add_table(rows=len(table), cols=len(table[0]))
        for i, row in enumerate(table):
            for j, cell in enumerate(row):
                t.cell(i, j).text = cell
    buf = io.BytesIO()
    doc.save(buf)
    return buf.getvalue()


def test_resolve_content_type_known_types():
    assert resolve_content_type("cv.pdf", PDF_TYPE) == PDF_TYPE
    assert resolve_content_type("cv.docx", DOCX_TYPE) == DOCX_TYPE
    assert resolve_content_type("cv.png", "image/png") == "image/png"
    assert resolve_content_type("cv.jpg", "image/jpg") == "image/jpeg"


def test_resolve_content_type_falls_back_to_extension():
    assert resolve_content_type("cv.PDF", None) == PDF_TYPE
    assert resolve_content_type("cv.docx", "application/octet-stream") == DOCX_TYPE
    assert resolve_content_type("photo.jpeg", "") == "image/jpeg"


def test_resolve_content_type_rejects_unsupported():
    assert resolve_content_type("cv.txt", "text/plain") is None
    assert resolve_content_type("cv.doc", "application/msword") is None
    assert resolve_content_type("cv", None) is None
    # A declared type wins over a misleading extension
    assert resolve_content_type("cv.pdf", "text/plain") is None


def test_clean_text_collapses_whitespace():
    assert clean_text("Jane   Doe\t\tRecruiter\n\n\n\nSkills") == "Jane Doe Recruiter\n\nSkills"


def test_extract_text_docx_reads_paragraphs_and_tables():
    content = _make_docx(
        ["Jane Doe", "Senior Recruiter at Acme"],
        table=[["Industry", "Technology"]],
    )
    text = extract_text_docx(content)
    assert "Jane Doe" in text
    assert "Senior Recruiter at Acme" in text
    assert "Industry | Technology" in text


@pytest.mark.asyncio
async def test_extract_from_bytes_docx():
    text = await extract_from_bytes(_make_docx(["Jane   Doe", "", "", "", "Recruiter"]), DOCX_TYPE)
    assert text == "Jane Doe\n\nRecruiter"


@pytest.mark.asyncio
async def test_extract_from_bytes_image_uses_transcription(fake_gemini):
    fake_gemini["transcription"] = "Jane Doe\nTalent Partner"
    text = await extract_from_bytes(b"\x89PNG...", "image/png")
    assert text == "Jane Doe\nTalent Partner"
    assert fake_gemini["prompts"] == ["<image image/png>"]


@pytest.mark.asyncio
async def test_extract_from_bytes_image_transcription_failure(fake_gemini):
    assert await extract_from_bytes(b"\xff\xd8", "image/jpeg") == ""


@pytest.mark.asyncio
async def test_extract_from_bytes_corrupt_pdf_raises():
    with pytest.raises(Exception):
        await extract_from_bytes(b"not really a pdf", PDF_TYPE)


@pytest.mark.asyncio
async def test_extract_from_bytes_unsupported_type():
    with pytest.raises(ValueError):
        await extract_from_bytes(b"hello", "text/plain")
