"""API router exposing the extract, translate and document generation endpoints."""
from __future__ import annotations

import logging
import re
from urllib.parse import quote

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import Response
from pydantic import BaseModel, ConfigDict, Field
from starlette.concurrency import run_in_threadpool

from doctranslate.config import get_settings
from doctranslate.errors import DocumentTranslatorError, InvalidInput, ProviderFailure, RenderFailure
from doctranslate.extract import detect_format, extract_text
from doctranslate.languages import SUPPORTED_LANGUAGES
from doctranslate.telemetry import traced_duration
from doctranslate.translation import Translator, get_translator
from doctranslate.typesetting import render_pdf, text_download_name

LOGGER = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["documents"])


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ExtractResponse(_CamelModel):
    """Response body returned from the extract endpoint."""

    text: str
    file_name: str = Field(..., alias="fileName")


class TranslateRequest(_CamelModel):
    """Request body accepted by the translate endpoint."""

    text: str | None = None
    target_lang: str | None = Field(None, alias="targetLang")
    source_lang: str | None = Field(None, alias="sourceLang")


class TranslateResponse(_CamelModel):
    translated_text: str = Field(..., alias="translatedText")


class GenerateRequest(_CamelModel):
    """Request body accepted by the document generation endpoints."""

    text: str | None = None
    file_name: str | None = Field(None, alias="fileName")


class LanguageItem(BaseModel):
    code: str
    name: str


class LanguagesResponse(BaseModel):
    languages: list[LanguageItem]


_UNSAFE_HEADER_CHARS = re.compile(r'[\x00-\x1f\x7f-\x9f"\\]')


def _content_disposition(file_name: str) -> str:
    safe_name = _UNSAFE_HEADER_CHARS.sub("_", file_name)
    try:
        safe_name.encode("latin-1")
    except UnicodeEncodeError:
        fallback = safe_name.encode("ascii", "replace").decode("ascii").replace("?", "_")
        return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(file_name)}"
    return f'attachment; filename="{safe_name}"'


@router.post("/extract", response_model=ExtractResponse)
async def extract_document(file: UploadFile | None = File(None)) -> ExtractResponse:
    """Extract plain text from an uploaded PDF, DOCX or TXT file."""

    if file is None or not file.filename:
        raise InvalidInput("No file provided")

    file_name = file.filename
    with traced_duration("api.extract", logger=LOGGER, file=file_name):
        detect_format(file_name)
        data = await file.read()
        try:
            extracted = await run_in_threadpool(extract_text, data, file_name)
        except DocumentTranslatorError:
            raise
        except Exception as error:
            raise ProviderFailure("Failed to extract text from document", cause=error) from error

    return ExtractResponse(text=extracted.text, file_name=extracted.file_name)


@router.post("/translate", response_model=TranslateResponse)
async def translate_text(
    request: TranslateRequest,
    translator: Translator = Depends(get_translator),
) -> TranslateResponse:
    """Translate text chunk by chunk; failed chunks keep their original text."""

    if not request.text or not request.target_lang:
        raise InvalidInput("Text and target language are required")

    with traced_duration("api.translate", logger=LOGGER, target_lang=request.target_lang):
        try:
            translated = await translator.translate(request.text, request.target_lang, request.source_lang)
        except DocumentTranslatorError:
            raise
        except Exception as error:
            raise ProviderFailure("Failed to translate text", cause=error) from error

    return TranslateResponse(translated_text=translated)


@router.post("/generate-pdf")
async def generate_pdf(request: GenerateRequest) -> Response:
    """Typeset the supplied text into a downloadable PDF."""

    if not request.text:
        raise InvalidInput("Text is required")

    font_path = get_settings().pdf_font_path
    with traced_duration("api.generate_pdf", logger=LOGGER, chars=len(request.text)):
        try:
            document = await run_in_threadpool(
                render_pdf, request.text, request.file_name, font_path=font_path
            )
        except DocumentTranslatorError:
            raise
        except Exception as error:
            raise RenderFailure("Failed to generate PDF", cause=error) from error

    return Response(
        content=document.content,
        media_type="application/pdf",
        headers={"Content-Disposition": _content_disposition(document.file_name)},
    )


@router.post("/generate-text")
async def generate_text(request: GenerateRequest) -> Response:
    """Return the supplied text as a UTF-8 plain-text download."""

    if not request.text:
        raise InvalidInput("Text is required")

    return Response(
        content=request.text.encode("utf-8"),
        media_type="text/plain; charset=utf-8",
        headers={"Content-Disposition": _content_disposition(text_download_name(request.file_name))},
    )


@router.get("/languages", response_model=LanguagesResponse)
def list_languages() -> LanguagesResponse:
    """List the target languages offered by the client."""

    return LanguagesResponse(
        languages=[LanguageItem(code=language.code, name=language.name) for language in SUPPORTED_LANGUAGES]
    )
