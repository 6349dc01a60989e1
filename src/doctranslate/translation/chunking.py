"""Fixed-width chunking of text ahead of translation."""
from __future__ import annotations

from doctranslate.config import DEFAULT_CHUNK_CHARS


def split_into_chunks(text: str, max_chars: int = DEFAULT_CHUNK_CHARS) -> list[str]:
    """Split ``text`` left to right into pieces of at most ``max_chars`` characters.

    Word and sentence boundaries are ignored, so a chunk may end mid-word.
    Joining the result with ``""`` always reproduces ``text``.
    """

    if max_chars < 1:
        raise ValueError("max_chars must be a positive integer")
    return [text[start : start + max_chars] for start in range(0, len(text), max_chars)]
