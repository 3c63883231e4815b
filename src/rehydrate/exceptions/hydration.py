"""Exceptions raised while hydrating marker files.

Per-marker errors derive from :class:`MarkerError` and carry a stable ``code``
that the orchestrator records on the marker's outcome. They never abort the
run. :class:`HydrationRootError` is the only fatal condition.
"""

from __future__ import annotations

from pathlib import Path

from rehydrate.constants.reporting import (
    ERROR_INVALID_MARKER,
    ERROR_SOURCE_NOT_FOUND,
    ERROR_WRITE_FAILURE,
)
from rehydrate.exceptions.base import RehydrateError


class MarkerError(RehydrateError):
    """Raised when a single marker file cannot be hydrated."""

    code: str = "MarkerError"

    def __init__(self, marker: Path, message: str) -> None:
        super().__init__(message)
        self.marker = marker
        self.message = message


class InvalidMarkerError(MarkerError):
    """Raised when a marker is unreadable, empty, or malformed."""

    code = ERROR_INVALID_MARKER


class SourceNotFoundError(MarkerError):
    """Raised when neither the primary nor the fallback source exists."""

    code = ERROR_SOURCE_NOT_FOUND

    def __init__(self, marker: Path, candidates: tuple[Path, ...]) -> None:
        tried = ", ".join(str(candidate) for candidate in candidates)
        super().__init__(marker, f"source not found: {tried}")
        self.candidates = candidates


class WriteFailureError(MarkerError):
    """Raised when the target cannot be written or the marker cannot be removed."""

    code = ERROR_WRITE_FAILURE


class HydrationRootError(RehydrateError, OSError):
    """Raised when the traversal root is missing or unreadable."""
