"""Marker file discovery under a hydration root."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from rehydrate.config import HydrateConfig
from rehydrate.exceptions import HydrationRootError

logger = logging.getLogger(__name__)


def discover_marker_files(root: Path, config: HydrateConfig) -> tuple[list[Path], list[str]]:
    """Walk *root* and return marker files plus warnings for skipped directories.

    Traversal uses an explicit directory stack. Directory symlinks are not
    followed and directories named in ``config.ignore_dirs`` are skipped.
    Markers are returned sorted by their path relative to *root*.

    Raises:
        HydrationRootError: If *root* is missing, not a directory, or unreadable.
    """
    if not root.exists():
        raise HydrationRootError(f"Root directory not found: {root}")
    if not root.is_dir():
        raise HydrationRootError(f"Root is not a directory: {root}")

    markers: list[Path] = []
    warnings: list[str] = []
    ignored = frozenset(config.ignore_dirs)
    stack: list[Path] = [root]

    while stack:
        directory = stack.pop()
        try:
            with os.scandir(directory) as entries:
                children = sorted(entries, key=lambda entry: entry.name)
        except OSError as exc:
            if directory == root:
                raise HydrationRootError(f"Cannot read root directory {root}: {exc}") from exc
            message = f"Skipped unreadable directory {_stable_path_key(directory, root)}: {exc.strerror or exc}"
            logger.warning("%s", message)
            warnings.append(message)
            continue

        for entry in children:
            try:
                if entry.is_dir(follow_symlinks=False):
                    if entry.name in ignored:
                        logger.debug("Ignoring directory %s", entry.path)
                        continue
                    stack.append(Path(entry.path))
                elif config.is_marker_name(entry.name) and entry.is_file():
                    markers.append(Path(entry.path))
            except OSError as exc:
                message = f"Skipped unreadable entry {_stable_path_key(Path(entry.path), root)}: {exc.strerror or exc}"
                logger.warning("%s", message)
                warnings.append(message)

    markers.sort(key=lambda path: _stable_path_key(path, root))
    logger.debug("Discovered %d marker file(s) under %s", len(markers), root)
    return markers, warnings


def _stable_path_key(file_path: Path, root: Path) -> str:
    """Return a deterministic path key relative to *root* when possible."""
    try:
        return file_path.relative_to(root).as_posix()
    except ValueError:
        return file_path.as_posix()
