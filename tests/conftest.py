"""Shared fixtures: deterministic provider configuration and sample documents."""
from __future__ import annotations

import io
from typing import Iterator

import docx
import pytest
from reportlab.pdfgen import canvas

from doctranslate.config import reset_settings_cache
from doctranslate.translation import reset_translation_provider_cache


@pytest.fixture(autouse=True)
def _mock_provider_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.setenv("TRANSLATION_PROVIDER", "mock")
    for name in ("TRANSLATION_CHUNK_CHARS", "TRANSLATION_MAX_CONCURRENCY", "PDF_FONT_PATH"):
        monkeypatch.delenv(name, raising=False)
    reset_settings_cache()
    reset_translation_provider_cache()
    yield
    reset_settings_cache()
    reset_translation_provider_cache()


@pytest.fixture
def pdf_bytes() -> bytes:
    buffer = io.BytesIO()
    pdf = canvas.Canvas(buffer, pagesize=(200, 200))
    pdf.setFont("Helvetica", 12)
    pdf.drawString(20, 120, "Hello PDF")
    pdf.showPage()
    pdf.save()
    return buffer.getvalue()


@pytest.fixture
def docx_bytes() -> bytes:
    document = docx.Document()
    document.add_paragraph("Hello from DOCX!")
    document.add_paragraph("")
    document.add_paragraph("Second paragraph.")
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()
