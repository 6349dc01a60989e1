"""Environment driven settings for the document translator service."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

LOGGER = logging.getLogger(__name__)

DEFAULT_CHUNK_CHARS = 5000
DEFAULT_CORS_ORIGINS = "http://localhost:3000"


def _int_from_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        LOGGER.warning("Invalid integer for %s: %s; using default %s", name, value, default)
        return default


def _list_from_env(name: str, default: str) -> tuple[str, ...]:
    raw = os.getenv(name, default)
    return tuple(item.strip() for item in raw.split(",") if item.strip())


@dataclass(frozen=True, slots=True)
class Settings:
    """Runtime configuration resolved once per process."""

    translation_provider: str = "google"
    chunk_chars: int = DEFAULT_CHUNK_CHARS
    max_concurrency: int = 0
    pdf_font_path: str | None = None
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: tuple[str, ...] = (DEFAULT_CORS_ORIGINS,)


@lru_cache()
def get_settings() -> Settings:
    """Return the settings derived from the current environment."""

    chunk_chars = _int_from_env("TRANSLATION_CHUNK_CHARS", DEFAULT_CHUNK_CHARS)
    if chunk_chars < 1:
        LOGGER.warning("TRANSLATION_CHUNK_CHARS must be positive; using %s", DEFAULT_CHUNK_CHARS)
        chunk_chars = DEFAULT_CHUNK_CHARS

    font_path = os.getenv("PDF_FONT_PATH", "").strip() or None

    return Settings(
        translation_provider=os.getenv("TRANSLATION_PROVIDER", "google").strip().lower(),
        chunk_chars=chunk_chars,
        max_concurrency=max(_int_from_env("TRANSLATION_MAX_CONCURRENCY", 0), 0),
        pdf_font_path=font_path,
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO",
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int_from_env("PORT", 8000),
        cors_origins=_list_from_env("CORS_ORIGINS", DEFAULT_CORS_ORIGINS),
    )


def reset_settings_cache() -> None:
    """Clear the cached settings (primarily for testing)."""

    get_settings.cache_clear()
