"""Configuration loading and normalization for Rehydrate runs."""

from __future__ import annotations

from rehydrate.config.loader import load_config
from rehydrate.config.model import HydrateConfig

__all__ = ["HydrateConfig", "load_config"]
