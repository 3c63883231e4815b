"""Shared exception hierarchy for Rehydrate."""

from __future__ import annotations

from .base import RehydrateError
from .config import ConfigError
from .hydration import (
    HydrationRootError,
    InvalidMarkerError,
    MarkerError,
    SourceNotFoundError,
    WriteFailureError,
)

__all__ = [
    "ConfigError",
    "HydrationRootError",
    "InvalidMarkerError",
    "MarkerError",
    "RehydrateError",
    "SourceNotFoundError",
    "WriteFailureError",
]
