"""Text extraction from uploaded resume files."""

import io
import re

import pdfplumber
from docx import Document

from services import gemini_client

PDF_TYPE = "application/pdf"
DOCX_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
IMAGE_TYPES = frozenset({"image/png", "image/jpeg", "image/jpg"})

SUPPORTED_TYPES = frozenset({PDF_TYPE, DOCX_TYPE}) | IMAGE_TYPES

# Fallback when the browser sends an empty or generic content type
_EXTENSION_TYPES: dict[str, str] = {
    ".pdf": PDF_TYPE,
    ".docx": DOCX_TYPE,
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
}


def resolve_content_type(filename: str | None, content_type: str | None) -> str | None:
    """Pick the effective MIME type, falling back to the file extension."""
    ctype = (content_type or "").split(";")[0].strip().lower()
    if ctype == "image/jpg":
        return "image/jpeg"
    if ctype in SUPPORTED_TYPES:
        return ctype
    if ctype and ctype != "application/octet-stream":
        return None
    name = (filename or "").lower()
    for ext, mapped in _EXTENSION_TYPES.items():
        if name.endswith(ext):
            return mapped
    return None


def extract_text(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file."""
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n".join(pages).strip()


def extract_text_docx(docx_bytes: bytes) -> str:
    """Extract all text from a DOCX file, including table cells."""
    doc = Document(io.BytesIO(docx_bytes))
    parts = [p.text for p in doc.paragraphs]
    for table in doc.tables:
        for row in table.rows:
            parts.append(" | ".join(cell.text.strip() for cell in row.cells))
    return "\n".join(parts).strip()


def clean_text(text: str) -> str:
    """Collapse runs of spaces and blank lines."""
    text = re.sub(r"[ \t]+", " ", text)
    text = re.sub(r"\n\s*\n\s*\n+", "\n\n", text)
    return text.strip()


async def extract_from_bytes(content: bytes, content_type: str) -> str:
    """Extract readable text for a supported content type.

    Raises whatever the underlying parser raises on corrupt or encrypted
    files; an image that Gemini cannot read yields an empty string.
    """
    if content_type == PDF_TYPE:
        text = extract_text(content)
    elif content_type == DOCX_TYPE:
        text = extract_text_docx(content)
    elif content_type in IMAGE_TYPES:
        text = await gemini_client.transcribe_image(content, content_type) or ""
    else:
        raise ValueError(f"Unsupported content type: {content_type}")
    return clean_text(text)
