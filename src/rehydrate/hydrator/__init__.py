"""Marker discovery, source resolution, and hydration."""

from __future__ import annotations

from typing import Any

__all__ = ["hydrate"]


def __getattr__(name: str) -> Any:
    """Lazily expose hydration APIs to avoid import cycles at package import time."""
    if name == "hydrate":
        from .orchestrator import hydrate

        return hydrate
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
