"""End-to-end hydration pass over a directory tree.

``hydrate`` is the primary entry point. Each marker is processed on its own;
per-marker errors become failed outcomes and never stop the pass.
"""

from __future__ import annotations

import logging
import os
import time
from contextlib import suppress
from pathlib import Path

from rehydrate.config import HydrateConfig, load_config
from rehydrate.constants.reporting import STATUS_FAILED, STATUS_HYDRATED, STATUS_PENDING
from rehydrate.exceptions import MarkerError, SourceNotFoundError, WriteFailureError
from rehydrate.hydrator.discovery import discover_marker_files
from rehydrate.hydrator.resolution import read_marker_reference, resolve_source, target_path_for
from rehydrate.io import copy_file_atomic, file_sha256
from rehydrate.model import HydrationResult, MarkerOutcome

logger = logging.getLogger(__name__)


def hydrate(
    root: Path,
    *,
    config: HydrateConfig | None = None,
    config_path: Path | None = None,
    dry_run: bool = False,
) -> HydrationResult:
    """Replace every marker under *root* with the source file it references.

    Raises:
        ConfigError: If the config file is invalid.
        HydrationRootError: If *root* cannot be read.
    """
    started = time.perf_counter()
    root = Path(os.path.abspath(root))
    if config is None:
        config = load_config(root, config_path)

    markers, warnings = discover_marker_files(root, config)
    outcomes = tuple(_process_marker(marker, config, dry_run=dry_run) for marker in markers)

    result = HydrationResult(
        root=root,
        outcomes=outcomes,
        duration_seconds=time.perf_counter() - started,
        dry_run=dry_run,
        warnings=tuple(warnings),
    )
    logger.debug(
        "Hydration pass over %s: %d hydrated, %d pending, %d failed",
        root,
        len(result.hydrated),
        len(result.pending),
        len(result.failed),
    )
    return result


def _process_marker(marker: Path, config: HydrateConfig, *, dry_run: bool) -> MarkerOutcome:
    """Hydrate one marker, converting marker errors into a failed outcome."""
    target: Path | None = None
    reference: str | None = None
    try:
        target = target_path_for(marker, config)
        reference = read_marker_reference(marker)
        resolved = resolve_source(marker, reference, config)
        if dry_run:
            return MarkerOutcome(
                marker=marker,
                target=target,
                status=STATUS_PENDING,
                reference=reference,
                source=resolved.path,
                used_fallback=resolved.used_fallback,
                candidates=resolved.candidates,
            )
        bytes_copied, digest = _copy_then_remove_marker(marker, resolved.path, target)
    except MarkerError as exc:
        logger.warning("Failed to hydrate %s: [%s] %s", marker, exc.code, exc.message)
        candidates = exc.candidates if isinstance(exc, SourceNotFoundError) else ()
        return MarkerOutcome(
            marker=marker,
            target=target,
            status=STATUS_FAILED,
            reference=reference,
            error_code=exc.code,
            message=exc.message,
            candidates=candidates,
        )

    logger.debug("Hydrated %s from %s (%d bytes)", target, resolved.path, bytes_copied)
    return MarkerOutcome(
        marker=marker,
        target=target,
        status=STATUS_HYDRATED,
        reference=reference,
        source=resolved.path,
        used_fallback=resolved.used_fallback,
        bytes_copied=bytes_copied,
        sha256=digest,
        candidates=resolved.candidates,
    )


def _copy_then_remove_marker(marker: Path, source: Path, target: Path) -> tuple[int, str]:
    """Copy *source* over *target*, then delete *marker*.

    A target that did not exist beforehand is removed again if the marker
    cannot be deleted, so the marker stays the only trace of the failure.

    Raises:
        WriteFailureError: If copying or deleting fails.
    """
    target_existed = target.exists()
    try:
        bytes_copied = copy_file_atomic(source, target)
        digest = file_sha256(target)
    except OSError as exc:
        raise WriteFailureError(marker, f"cannot write {target}: {exc}") from exc

    try:
        marker.unlink()
    except OSError as exc:
        if not target_existed and target != source:
            with suppress(OSError):
                target.unlink()
        raise WriteFailureError(marker, f"copied to {target} but cannot delete marker: {exc}") from exc

    return bytes_copied, digest
