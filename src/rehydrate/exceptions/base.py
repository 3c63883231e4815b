"""Base exception for Rehydrate."""

from __future__ import annotations


class RehydrateError(Exception):
    """Base class for all errors raised by Rehydrate."""
