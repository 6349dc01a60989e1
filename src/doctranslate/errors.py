"""Exception hierarchy shared by the extraction, translation and rendering steps."""
from __future__ import annotations


class DocumentTranslatorError(RuntimeError):
    """Base class for failures reported back to API clients."""

    status_code: int = 500

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.__cause__ = cause


class InvalidInput(DocumentTranslatorError):
    """Raised when a required request field is missing or empty."""

    status_code = 400


class UnsupportedFormat(DocumentTranslatorError):
    """Raised when an upload carries a file suffix we cannot extract."""

    status_code = 400


class EmptyDocument(DocumentTranslatorError):
    """Raised when extraction succeeds but yields no visible text."""

    status_code = 400


class ProviderFailure(DocumentTranslatorError):
    """Raised when a third-party library or service fails."""

    status_code = 500


class ExtractionFailure(ProviderFailure):
    """Raised when a PDF/DOCX/TXT reader cannot process the upload."""


class RenderFailure(DocumentTranslatorError):
    """Raised when the PDF cannot be typeset or serialised."""

    status_code = 500


__all__ = [
    "DocumentTranslatorError",
    "EmptyDocument",
    "ExtractionFailure",
    "InvalidInput",
    "ProviderFailure",
    "RenderFailure",
    "UnsupportedFormat",
]
