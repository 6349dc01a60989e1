"""HTTP routers for the document translator service."""
from __future__ import annotations

from .routes import router

__all__ = ["router"]
