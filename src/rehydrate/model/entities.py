"""Outcome records produced by a hydration run."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from rehydrate.constants.reporting import (
    SCHEMA_VERSION,
    STATUS_FAILED,
    STATUS_HYDRATED,
    STATUS_PENDING,
)
from rehydrate.types import JsonObject, OutcomeStatus


def relative_display(path: Path | None, root: Path) -> str | None:
    """Render *path* relative to *root* when possible, else as an absolute posix path."""
    if path is None:
        return None
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()


@dataclass(frozen=True)
class MarkerOutcome:
    """Result of processing one marker file."""

    marker: Path
    target: Path | None
    status: OutcomeStatus
    reference: str | None = None
    source: Path | None = None
    used_fallback: bool = False
    bytes_copied: int = 0
    sha256: str | None = None
    error_code: str | None = None
    message: str | None = None
    candidates: tuple[Path, ...] = ()

    @property
    def failed(self) -> bool:
        return self.status == STATUS_FAILED

    def to_dict(self, root: Path) -> JsonObject:
        """Serialize with paths rendered relative to *root*."""
        return {
            "marker": relative_display(self.marker, root),
            "target": relative_display(self.target, root),
            "status": self.status,
            "reference": self.reference,
            "source": relative_display(self.source, root),
            "used_fallback": self.used_fallback,
            "bytes_copied": self.bytes_copied,
            "sha256": self.sha256,
            "error_code": self.error_code,
            "message": self.message,
            "candidates": [relative_display(candidate, root) for candidate in self.candidates],
        }


@dataclass(frozen=True)
class HydrationResult:
    """Aggregate result for one hydration pass over a directory tree."""

    root: Path
    outcomes: tuple[MarkerOutcome, ...]
    duration_seconds: float
    dry_run: bool = False
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def hydrated(self) -> tuple[MarkerOutcome, ...]:
        return tuple(outcome for outcome in self.outcomes if outcome.status == STATUS_HYDRATED)

    @property
    def pending(self) -> tuple[MarkerOutcome, ...]:
        return tuple(outcome for outcome in self.outcomes if outcome.status == STATUS_PENDING)

    @property
    def failed(self) -> tuple[MarkerOutcome, ...]:
        return tuple(outcome for outcome in self.outcomes if outcome.failed)

    @property
    def ok(self) -> bool:
        """True when no marker failed."""
        return not self.failed

    def counts_by_error(self) -> dict[str, int]:
        """Return failure counts keyed by error code, sorted by code."""
        counts: dict[str, int] = {}
        for outcome in self.failed:
            code = outcome.error_code or "unknown"
            counts[code] = counts.get(code, 0) + 1
        return dict(sorted(counts.items()))

    def to_dict(self) -> JsonObject:
        """Serialize the run for the JSON report."""
        return {
            "schema_version": SCHEMA_VERSION,
            "root": self.root.as_posix(),
            "dry_run": self.dry_run,
            "duration_seconds": round(self.duration_seconds, 6),
            "markers_found": len(self.outcomes),
            "hydrated": len(self.hydrated),
            "pending": len(self.pending),
            "failed": len(self.failed),
            "counts_by_error": self.counts_by_error(),
            "warnings": list(self.warnings),
            "outcomes": [outcome.to_dict(self.root) for outcome in self.outcomes],
        }
