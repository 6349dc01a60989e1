"""Chunked machine translation helpers."""
from __future__ import annotations

from .chunking import split_into_chunks
from .providers import (
    GoogleTranslationProvider,
    MockTranslationProvider,
    TranslationProvider,
    get_translation_provider,
    reset_translation_provider_cache,
)
from .translator import Translator, get_translator

__all__ = [
    "GoogleTranslationProvider",
    "MockTranslationProvider",
    "TranslationProvider",
    "Translator",
    "get_translation_provider",
    "get_translator",
    "reset_translation_provider_cache",
    "split_into_chunks",
]
