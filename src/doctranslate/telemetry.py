"""Structured lifecycle events for the extraction, translation and rendering steps."""

from __future__ import annotations

import logging
import os
import platform
import sys
import time
import traceback
from contextlib import contextmanager
from typing import Any, Iterator, Optional

LOGGER = logging.getLogger("doctranslate.telemetry")

_ENV_KEYS_TO_LOG: tuple[str, ...] = (
    "TRANSLATION_PROVIDER",
    "TRANSLATION_CHUNK_CHARS",
    "TRANSLATION_MAX_CONCURRENCY",
    "PDF_FONT_PATH",
    "LOG_LEVEL",
    "CORS_ORIGINS",
)


def _format_exception(error: BaseException) -> str:
    return "".join(traceback.format_exception(error.__class__, error, error.__traceback__))


def log_event(
    logger: Optional[logging.Logger],
    step: str,
    *,
    level: str = "info",
    duration_ms: float | None = None,
    exc: BaseException | str | None = None,
    details: dict[str, Any] | None = None,
    **payload: Any,
) -> None:
    """Emit a structured log event with the service's event schema."""

    logger = logger or LOGGER
    event: dict[str, Any] = {"step": step, "module": logger.name}
    if duration_ms is not None:
        event["duration_ms"] = round(duration_ms, 3)
    if details is not None:
        event["details"] = details
    event.update(payload)

    exc_info = None
    if exc is not None:
        if isinstance(exc, BaseException):
            event["exc"] = _format_exception(exc)
            exc_info = (exc.__class__, exc, exc.__traceback__)
        else:
            event["exc"] = str(exc)

    log_method = getattr(logger, level.lower(), logger.info)
    log_method(event, exc_info=exc_info)


def emit_app_startup_event() -> None:
    env_values = {key: os.getenv(key) for key in _ENV_KEYS_TO_LOG if os.getenv(key) is not None}
    details = {
        "env": env_values,
        "python": sys.version.split()[0],
        "platform": platform.platform(),
    }
    log_event(LOGGER, "app.startup", details=details, pid=os.getpid())


def emit_extract_event(
    *,
    file_name: str,
    document_format: str,
    size_bytes: int,
    chars: int,
    duration_ms: float,
) -> None:
    details = {
        "file": file_name,
        "format": document_format,
        "size_bytes": size_bytes,
        "chars": chars,
    }
    log_event(LOGGER, "extract.complete", duration_ms=duration_ms, details=details)


def emit_chunk_fallback(
    *,
    index: int,
    chunk_chars: int,
    target_lang: str,
    error: BaseException | None = None,
) -> None:
    details = {
        "chunk_index": index,
        "chunk_chars": chunk_chars,
        "target_lang": target_lang,
        "reason": "provider_error" if error is not None else "empty_result",
    }
    log_event(LOGGER, "translate.chunk.fallback", level="warning", details=details, exc=error)


def emit_translate_event(
    *,
    provider: str,
    target_lang: str,
    source_lang: str,
    chunks: int,
    fallbacks: int,
    input_chars: int,
    output_chars: int,
    duration_ms: float,
) -> None:
    details = {
        "provider": provider,
        "target_lang": target_lang,
        "source_lang": source_lang,
        "chunks": chunks,
        "fallbacks": fallbacks,
        "input_chars": input_chars,
        "output_chars": output_chars,
    }
    log_event(LOGGER, "translate.complete", duration_ms=duration_ms, details=details)


def emit_render_event(*, lines: int, pages: int, size_bytes: int, font: str, duration_ms: float) -> None:
    details = {"lines": lines, "pages": pages, "size_bytes": size_bytes, "font": font}
    log_event(LOGGER, "pdf.render.complete", duration_ms=duration_ms, details=details)


def emit_exception(*, module: str, error: BaseException, path: str | None = None) -> None:
    details: dict[str, Any] = {"module": module}
    if path:
        details["path"] = path
    log_event(LOGGER, "exception", level="error", details=details, exc=error)


@contextmanager
def traced_duration(step: str, *, logger: Optional[logging.Logger] = None, **fields: Any) -> Iterator[None]:
    start = time.perf_counter()
    log_event(logger or LOGGER, f"{step}.start", level="debug", details=fields)
    try:
        yield
    except Exception as error:
        if getattr(error, "status_code", 500) < 500:
            log_event(logger or LOGGER, f"{step}.rejected", level="info", details=fields, reason=str(error))
        else:
            log_event(logger or LOGGER, f"{step}.error", level="error", details=fields, exc=error)
        raise
    finally:
        log_event(
            logger or LOGGER,
            f"{step}.end",
            level="debug",
            duration_ms=(time.perf_counter() - start) * 1000.0,
            details=fields,
        )


__all__ = [
    "emit_app_startup_event",
    "emit_chunk_fallback",
    "emit_exception",
    "emit_extract_event",
    "emit_render_event",
    "emit_translate_event",
    "log_event",
    "traced_duration",
]
