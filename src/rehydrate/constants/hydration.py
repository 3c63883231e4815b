"""Constants for marker discovery, target naming, and source fallback."""

from __future__ import annotations

MARKER_SUFFIX: str = "-replace.txt"
TARGET_EXTENSION: str = ".md"
MARKER_SUFFIX_REQUIRED_EXTENSION: str = ".txt"

# Canonical sibling project consulted when a marker's relative path is missing.
FALLBACK_PROJECT_DIRNAME: str = "style-guides"

DEFAULT_IGNORE_DIRS: tuple[str, ...] = (".git",)

COPY_TEMP_PREFIX: str = ".tmp-rehydrate-"
COPY_TEMP_SUFFIX: str = ".part"
COPY_CHUNK_SIZE: int = 1024 * 1024
FILE_HASH_CHUNK_SIZE: int = 1024 * 1024
