"""Configuration-related exceptions."""

from __future__ import annotations

from rehydrate.exceptions.base import RehydrateError


class ConfigError(RehydrateError, ValueError):
    """Raised when hydration configuration is invalid."""
