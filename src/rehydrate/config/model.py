"""Config data model for Rehydrate runs."""

from __future__ import annotations

from dataclasses import dataclass

from rehydrate.constants.hydration import (
    DEFAULT_IGNORE_DIRS,
    FALLBACK_PROJECT_DIRNAME,
    MARKER_SUFFIX,
    TARGET_EXTENSION,
)


@dataclass(frozen=True)
class HydrateConfig:
    """Resolved hydration config."""

    marker_suffix: str = MARKER_SUFFIX
    target_extension: str = TARGET_EXTENSION
    fallback_project: str = FALLBACK_PROJECT_DIRNAME
    ignore_dirs: tuple[str, ...] = DEFAULT_IGNORE_DIRS

    def is_marker_name(self, name: str) -> bool:
        """Return True when *name* carries the marker suffix."""
        return name.endswith(self.marker_suffix)

    def target_name_for(self, marker_name: str) -> str:
        """Map ``<name><marker_suffix>`` to ``<name><target_extension>``."""
        return marker_name[: -len(self.marker_suffix)] + self.target_extension
