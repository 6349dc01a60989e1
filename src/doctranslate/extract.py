"""Utilities for extracting text from uploaded documents."""
from __future__ import annotations

import io
import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from docx import Document as load_docx
from docx.table import Table
from pdfminer.high_level import extract_text as pdf_extract_text

from doctranslate.errors import EmptyDocument, ExtractionFailure, UnsupportedFormat
from doctranslate.telemetry import emit_extract_event

LOGGER = logging.getLogger(__name__)

SUPPORTED_SUFFIXES_MESSAGE = "Unsupported file type. Please upload PDF, DOCX, or TXT files."


class DocumentFormat(str, Enum):
    """Supported document formats, keyed by file suffix."""

    PDF = "pdf"
    DOCX = "docx"
    TXT = "txt"

    @property
    def suffix(self) -> str:
        return f".{self.value}"


@dataclass(frozen=True, slots=True)
class ExtractedText:
    """Plain text recovered from an upload along with its original name."""

    text: str
    file_name: str


def detect_format(file_name: str) -> DocumentFormat:
    """Return the document format implied by the file name suffix.

    Only the (case-insensitive) suffix is considered; the content is never
    sniffed. Unknown suffixes raise :class:`UnsupportedFormat`.
    """

    lowered = (file_name or "").lower()
    for document_format in DocumentFormat:
        if lowered.endswith(document_format.suffix):
            return document_format
    raise UnsupportedFormat(SUPPORTED_SUFFIXES_MESSAGE)


def extract_text(data: bytes, file_name: str) -> ExtractedText:
    """Extract textual content from the provided document bytes.

    Raises :class:`UnsupportedFormat` before reading ``data`` when the suffix is
    unknown, :class:`EmptyDocument` when nothing but whitespace was recovered
    and :class:`ExtractionFailure` when the underlying reader fails.
    """

    document_format = detect_format(file_name)
    started = time.perf_counter()

    try:
        text = _EXTRACTORS[document_format](data)
    except Exception as error:
        LOGGER.warning("Failed to extract %s content from %s: %s", document_format.value, file_name, error)
        raise ExtractionFailure("Failed to extract text from document", cause=error) from error

    if not text or not text.strip():
        raise EmptyDocument("No text found in the document")

    emit_extract_event(
        file_name=file_name,
        document_format=document_format.value,
        size_bytes=len(data),
        chars=len(text),
        duration_ms=(time.perf_counter() - started) * 1000.0,
    )
    return ExtractedText(text=text, file_name=file_name)


def _extract_pdf(data: bytes) -> str:
    return pdf_extract_text(io.BytesIO(data)) or ""


def _iter_docx_blocks(document) -> Iterator[str]:
    """Yield paragraph and table-cell text in body order."""

    for block in document.iter_inner_content():
        if isinstance(block, Table):
            for row in block.rows:
                for cell in row.cells:
                    yield cell.text
        else:
            yield block.text


def _extract_docx(data: bytes) -> str:
    document = load_docx(io.BytesIO(data))
    return "\n\n".join(text for text in _iter_docx_blocks(document) if text)


def _read_text(data: bytes) -> str:
    return data.decode("utf-8")


_EXTRACTORS = {
    DocumentFormat.PDF: _extract_pdf,
    DocumentFormat.DOCX: _extract_docx,
    DocumentFormat.TXT: _read_text,
}


__all__ = ["DocumentFormat", "ExtractedText", "detect_format", "extract_text"]
