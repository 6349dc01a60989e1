"""Translation provider interface and implementations."""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from functools import lru_cache

from deep_translator import GoogleTranslator

from doctranslate.config import get_settings

LOGGER = logging.getLogger(__name__)

AUTO_DETECT = "auto"

# Codes offered to users that Google Translate spells differently.
_GOOGLE_LANGUAGE_ALIASES = {
    "zh": "zh-CN",
    "he": "iw",
}


class TranslationProvider(ABC):
    """Abstract interface for machine translation backends."""

    name: str = "provider"

    @abstractmethod
    async def translate(self, text: str, target_lang: str, source_lang: str = AUTO_DETECT) -> str:
        """Translate ``text`` into ``target_lang``."""


class GoogleTranslationProvider(TranslationProvider):
    """Provider backed by deep-translator's unofficial Google Translate client."""

    name = "google"

    @staticmethod
    def normalise_language(code: str) -> str:
        return _GOOGLE_LANGUAGE_ALIASES.get(code, code)

    def _translate_sync(self, text: str, target_lang: str, source_lang: str) -> str:
        translator = GoogleTranslator(
            source=self.normalise_language(source_lang),
            target=self.normalise_language(target_lang),
        )
        return translator.translate(text) or ""

    async def translate(self, text: str, target_lang: str, source_lang: str = AUTO_DETECT) -> str:
        # deep-translator performs blocking HTTP calls.
        return await asyncio.to_thread(self._translate_sync, text, target_lang, source_lang)


@dataclass
class MockTranslationProvider(TranslationProvider):
    """Deterministic provider used for development and tests."""

    name = "mock"
    calls: list[tuple[str, str, str]] = field(default_factory=list)

    async def translate(self, text: str, target_lang: str, source_lang: str = AUTO_DETECT) -> str:
        self.calls.append((text, target_lang, source_lang))
        return f"[{target_lang}] {text}"


_PROVIDERS: dict[str, type[TranslationProvider]] = {
    GoogleTranslationProvider.name: GoogleTranslationProvider,
    MockTranslationProvider.name: MockTranslationProvider,
}


@lru_cache()
def get_translation_provider() -> TranslationProvider:
    """Return the provider selected by ``TRANSLATION_PROVIDER``."""

    backend = get_settings().translation_provider
    try:
        provider_cls = _PROVIDERS[backend]
    except KeyError as exc:
        raise ValueError(f"Unsupported TRANSLATION_PROVIDER backend: {backend!r}") from exc
    LOGGER.info("Using %s translation provider", backend)
    return provider_cls()


def reset_translation_provider_cache() -> None:
    """Clear the cached provider (primarily for testing)."""

    get_translation_provider.cache_clear()


__all__ = [
    "AUTO_DETECT",
    "GoogleTranslationProvider",
    "MockTranslationProvider",
    "TranslationProvider",
    "get_translation_provider",
    "reset_translation_provider_cache",
]
