"""Marker parsing and source-of-truth resolution."""

from __future__ import annotations

import errno
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from rehydrate.config import HydrateConfig
from rehydrate.exceptions import InvalidMarkerError, SourceNotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedSource:
    """A source file located for a marker."""

    path: Path
    used_fallback: bool
    candidates: tuple[Path, ...]


def read_marker_reference(marker: Path) -> str:
    """Return the trimmed relative path stored in *marker*.

    Raises:
        InvalidMarkerError: If the marker is unreadable, not UTF-8, empty,
            holds more than one line, or contains a NUL byte.
    """
    try:
        text = marker.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InvalidMarkerError(marker, f"cannot read marker: {exc}") from exc

    reference = text.lstrip("\ufeff").strip()
    if not reference:
        raise InvalidMarkerError(marker, "marker is empty")
    if "\n" in reference or "\r" in reference:
        raise InvalidMarkerError(marker, "marker must contain a single relative path")
    if "\x00" in reference:
        raise InvalidMarkerError(marker, "marker path contains a NUL byte")
    return reference


def target_path_for(marker: Path, config: HydrateConfig) -> Path:
    """Return the co-located target path for *marker*.

    Raises:
        InvalidMarkerError: If stripping the suffix leaves an empty name.
    """
    if marker.name == config.marker_suffix:
        raise InvalidMarkerError(marker, "marker filename has no name before the suffix")
    return marker.with_name(config.target_name_for(marker.name))


def primary_source_path(marker: Path, reference: str) -> Path:
    """Join the marker directory with its reference, collapsing ``..`` lexically.

    Symlinks are not resolved, so ``..`` climbs from the marker's own
    directory even when that directory is reached through a link.
    """
    return Path(os.path.normpath(marker.parent / reference))


def fallback_source_path(primary: Path, fallback_project: str) -> Path:
    """Relocate *primary* into the sibling canonical project.

    The fallback lives two levels above the primary file, inside
    ``fallback_project``, and keeps the primary's filename:
    ``/work/app/BAR.md`` becomes ``/work/<fallback_project>/BAR.md``.
    """
    return primary.parent.parent / fallback_project / primary.name


def resolve_source(marker: Path, reference: str, config: HydrateConfig) -> ResolvedSource:
    """Locate the source file for *marker*, trying the fallback project second.

    Raises:
        InvalidMarkerError: If the reference is not a usable path.
        SourceNotFoundError: If neither candidate is an existing file, or a
            candidate cannot be checked.
    """
    primary = primary_source_path(marker, reference)
    if _is_source_file(marker, primary, tried=(primary,)):
        return ResolvedSource(path=primary, used_fallback=False, candidates=(primary,))

    fallback = fallback_source_path(primary, config.fallback_project)
    logger.debug("Primary source %s missing for %s, trying %s", primary, marker, fallback)
    if _is_source_file(marker, fallback, tried=(primary, fallback)):
        return ResolvedSource(path=fallback, used_fallback=True, candidates=(primary, fallback))

    raise SourceNotFoundError(marker, (primary, fallback))


def _is_source_file(marker: Path, candidate: Path, *, tried: tuple[Path, ...]) -> bool:
    """Return True if *candidate* is a regular file, mapping stat errors to marker errors."""
    try:
        return candidate.is_file()
    except ValueError as exc:
        raise InvalidMarkerError(marker, f"invalid reference path {candidate}: {exc}") from exc
    except OSError as exc:
        if exc.errno == errno.ENAMETOOLONG:
            raise InvalidMarkerError(marker, f"reference path is too long: {candidate}") from exc
        logger.warning("Cannot check source %s for %s: %s", candidate, marker, exc)
        raise SourceNotFoundError(marker, tried) from exc
