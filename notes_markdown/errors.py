"""Exception hierarchy for notes-markdown."""
from __future__ import annotations

from typing import Any, Dict, Optional


class NotesMarkdownError(RuntimeError):
    """Base exception that carries structured context."""

    def __init__(self, message: str, *, context: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.context = context or {}


class DecodeError(NotesMarkdownError):
    """Raised when a payload is not valid JSON or not shaped like a document node."""


class DepthExceededError(NotesMarkdownError):
    """Raised when a document tree is nested deeper than the renderer allows."""


class MissingContentError(NotesMarkdownError):
    """Raised when a note has no content of the requested kind."""


__all__ = [
    "NotesMarkdownError",
    "DecodeError",
    "DepthExceededError",
    "MissingContentError",
]
