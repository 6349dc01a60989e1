"""Chunked, concurrent translation with per-chunk fallback."""
from __future__ import annotations

import asyncio
import contextlib
import logging
import time
from dataclasses import dataclass

from doctranslate.config import get_settings
from doctranslate.errors import InvalidInput
from doctranslate.telemetry import emit_chunk_fallback, emit_translate_event

from .chunking import split_into_chunks
from .providers import AUTO_DETECT, TranslationProvider, get_translation_provider

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class ChunkOutcome:
    """Result for a single chunk, indexed by its position in the source text."""

    index: int
    text: str
    translated: bool


class Translator:
    """Split text into chunks, translate them concurrently and reassemble in order."""

    def __init__(
        self,
        provider: TranslationProvider | None = None,
        *,
        chunk_chars: int | None = None,
        max_concurrency: int | None = None,
    ) -> None:
        settings = get_settings()
        self.provider = provider or get_translation_provider()
        self.chunk_chars = chunk_chars or settings.chunk_chars
        self.max_concurrency = settings.max_concurrency if max_concurrency is None else max_concurrency

    async def translate(self, text: str | None, target_lang: str | None, source_lang: str | None = None) -> str:
        if not text or not target_lang:
            raise InvalidInput("Text and target language are required")

        source = source_lang or AUTO_DETECT
        started = time.perf_counter()
        chunks = split_into_chunks(text, self.chunk_chars)

        limiter = asyncio.Semaphore(self.max_concurrency) if self.max_concurrency > 0 else None
        outcomes = await asyncio.gather(
            *(
                self._translate_chunk(index, chunk, target_lang, source, limiter)
                for index, chunk in enumerate(chunks)
            )
        )

        # gather preserves argument order; slots are still keyed by index.
        slots: list[str] = [""] * len(chunks)
        for outcome in outcomes:
            slots[outcome.index] = outcome.text
        translated_text = "".join(slots)

        emit_translate_event(
            provider=self.provider.name,
            target_lang=target_lang,
            source_lang=source,
            chunks=len(chunks),
            fallbacks=sum(1 for outcome in outcomes if not outcome.translated),
            input_chars=len(text),
            output_chars=len(translated_text),
            duration_ms=(time.perf_counter() - started) * 1000.0,
        )
        return translated_text

    async def _translate_chunk(
        self,
        index: int,
        chunk: str,
        target_lang: str,
        source_lang: str,
        limiter: asyncio.Semaphore | None,
    ) -> ChunkOutcome:
        try:
            async with limiter if limiter is not None else contextlib.nullcontext():
                result = await self.provider.translate(chunk, target_lang, source_lang)
        except Exception as error:
            LOGGER.debug("Translation failed for chunk %s; keeping original text", index)
            emit_chunk_fallback(index=index, chunk_chars=len(chunk), target_lang=target_lang, error=error)
            return ChunkOutcome(index=index, text=chunk, translated=False)

        if not result:
            emit_chunk_fallback(index=index, chunk_chars=len(chunk), target_lang=target_lang)
            return ChunkOutcome(index=index, text=chunk, translated=False)
        return ChunkOutcome(index=index, text=result, translated=True)


def get_translator() -> Translator:
    """FastAPI dependency returning a translator bound to the configured provider."""

    return Translator()


__all__ = ["ChunkOutcome", "Translator", "get_translator"]
