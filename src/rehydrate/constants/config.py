"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "rehydrate.yaml"

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "marker_suffix",
        "target_extension",
        "fallback_project",
        "ignore_dirs",
    }
)
