"""Greedy word wrap, pagination and PDF rendering of plain text."""
from __future__ import annotations

import io
import logging
import time
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Callable, Iterable

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.pdfgen import canvas

from doctranslate.errors import RenderFailure
from doctranslate.telemetry import emit_render_event

LOGGER = logging.getLogger(__name__)

DEFAULT_FONT = "Helvetica"
# Built-in Type1 faces only carry glyphs for WinAnsiEncoding.
DEFAULT_FONT_ENCODING = "cp1252"
DEFAULT_DOWNLOAD_STEM = "translated"

Measure = Callable[[str], float]


@dataclass(frozen=True, slots=True)
class PageGeometry:
    """Fixed page layout expressed in PDF points."""

    width: float = 595
    height: float = 842
    margin: float = 50
    font_size: float = 12
    line_spacing: float = 1.2

    @property
    def line_height(self) -> float:
        return self.font_size * self.line_spacing

    @property
    def usable_width(self) -> float:
        return self.width - 2 * self.margin

    @property
    def top(self) -> float:
        return self.height - self.margin

    @property
    def bottom_limit(self) -> float:
        return self.margin + self.line_height

    @property
    def lines_per_page(self) -> int:
        """Number of lines drawn on a page before the cursor crosses the bottom limit."""

        count = 0
        cursor = self.top
        while cursor >= self.bottom_limit:
            count += 1
            cursor -= self.line_height
        return max(count, 1)


A4 = PageGeometry()


@dataclass(frozen=True, slots=True)
class RenderedDocument:
    content: bytes
    file_name: str
    page_count: int


def wrap_text(text: str, measure: Measure, max_width: float) -> list[str]:
    """Greedily pack whitespace separated words into lines no wider than ``max_width``.

    A word that is wider than ``max_width`` on its own is emitted as a single,
    overflowing line; it is never split.
    """

    lines: list[str] = []
    current = ""
    for word in text.split():
        candidate = f"{current} {word}" if current else word
        if measure(candidate) > max_width and current:
            lines.append(current)
            current = word
        else:
            current = candidate
    if current:
        lines.append(current)
    return lines


def paginate(lines: Iterable[str], geometry: PageGeometry = A4) -> list[list[str]]:
    """Distribute lines over pages top to bottom, preserving their order."""

    pages: list[list[str]] = [[]]
    cursor = geometry.top
    for line in lines:
        if cursor < geometry.bottom_limit and pages[-1]:
            pages.append([])
            cursor = geometry.top
        pages[-1].append(line)
        cursor -= geometry.line_height
    return pages


@lru_cache()
def register_font(font_path: str) -> str:
    """Register a TrueType font with reportlab and return its face name."""

    path = Path(font_path)
    face_name = path.stem
    try:
        pdfmetrics.registerFont(TTFont(face_name, str(path)))
    except Exception as error:
        raise RenderFailure(f"Failed to load font {path.name}", cause=error) from error
    LOGGER.info("Registered PDF font %s from %s", face_name, path)
    return face_name


def ensure_encodable(text: str, encoding: str = DEFAULT_FONT_ENCODING) -> None:
    """Raise :class:`RenderFailure` when ``text`` has characters the built-in font cannot draw.

    Whitespace is not drawn and is ignored. Configure ``PDF_FONT_PATH``
    with a TrueType font to render scripts outside the encoding.
    """

    try:
        "".join(text.split()).encode(encoding)
    except UnicodeEncodeError as error:
        unsupported = error.object[error.start:error.end]
        LOGGER.warning(
            "Text contains characters %r that %s cannot render; set PDF_FONT_PATH to a TrueType font",
            unsupported,
            DEFAULT_FONT,
        )
        raise RenderFailure("Failed to generate PDF", cause=error) from error


def make_measure(font_name: str, font_size: float) -> Measure:
    def measure(value: str) -> float:
        return pdfmetrics.stringWidth(value, font_name, font_size)

    return measure


def pdf_download_name(file_name: str | None) -> str:
    return f"{file_name or DEFAULT_DOWNLOAD_STEM}.pdf"


def text_download_name(file_name: str | None) -> str:
    return f"{file_name or DEFAULT_DOWNLOAD_STEM}.txt"


def render_pdf(
    text: str,
    file_name: str | None = None,
    *,
    geometry: PageGeometry = A4,
    font_path: str | None = None,
) -> RenderedDocument:
    """Typeset ``text`` onto fixed-size pages and serialise the PDF."""

    started = time.perf_counter()
    font_name = register_font(font_path) if font_path else DEFAULT_FONT
    download_name = pdf_download_name(file_name)
    if not font_path:
        ensure_encodable(text)

    try:
        lines = wrap_text(text, make_measure(font_name, geometry.font_size), geometry.usable_width)
        pages = paginate(lines, geometry)

        buffer = io.BytesIO()
        pdf = canvas.Canvas(buffer, pagesize=(geometry.width, geometry.height))
        pdf.setTitle(download_name)
        for page in pages:
            pdf.setFont(font_name, geometry.font_size)
            pdf.setFillColorRGB(0, 0, 0)
            cursor = geometry.top
            for line in page:
                pdf.drawString(geometry.margin, cursor, line)
                cursor -= geometry.line_height
            pdf.showPage()
        pdf.save()
    except Exception as error:
        raise RenderFailure("Failed to generate PDF", cause=error) from error

    content = buffer.getvalue()
    emit_render_event(
        lines=len(lines),
        pages=len(pages),
        size_bytes=len(content),
        font=font_name,
        duration_ms=(time.perf_counter() - started) * 1000.0,
    )
    return RenderedDocument(content=content, file_name=download_name, page_count=len(pages))


__all__ = [
    "A4",
    "DEFAULT_FONT",
    "PageGeometry",
    "RenderedDocument",
    "ensure_encodable",
    "make_measure",
    "paginate",
    "pdf_download_name",
    "register_font",
    "render_pdf",
    "text_download_name",
    "wrap_text",
]
