"""Human-readable stdout reporter for hydration results."""

from __future__ import annotations

from rehydrate.constants.branding import ASCII_LOGO_LINES, RUN_SUMMARY_TITLE
from rehydrate.constants.reporting import ANSI_DIM, ANSI_RESET, ANSI_YELLOW, STATUS_COLORS
from rehydrate.model import HydrationResult, MarkerOutcome
from rehydrate.model.entities import relative_display


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


class StdoutReporter:
    """Formats hydration results as per-marker lines plus a summary block."""

    def __init__(self, result: HydrationResult, *, color: bool = True, verbose: bool = False) -> None:
        self._result = result
        self._color = color
        self._verbose = verbose

    def render(self) -> str:
        """Render the full stdout report as a single string."""
        sections = [self._render_outcomes(), self._render_summary()]
        return "\n".join(section for section in sections if section)

    def _render_outcomes(self) -> str:
        lines: list[str] = []
        for outcome in self._result.outcomes:
            lines.extend(self._render_outcome(outcome))
        for warning in self._result.warnings:
            lines.append(f"  {self._label('warning', ANSI_YELLOW)}  {warning}")
        return "\n".join(lines)

    def _render_outcome(self, outcome: MarkerOutcome) -> list[str]:
        marker = self._display(outcome)
        color = STATUS_COLORS[outcome.status]
        if outcome.failed:
            lines = [f"  {self._label('error', color)}  {marker}: [{outcome.error_code}] {outcome.message}"]
            if self._verbose and outcome.reference:
                lines.append(self._dim(f"           reference {outcome.reference}"))
            return lines

        target = relative_display(outcome.target, self._result.root)
        source = relative_display(outcome.source, self._result.root)
        origin = f"{source} (fallback)" if outcome.used_fallback else source
        if self._result.dry_run:
            return [f"  {self._label('would', color)}  hydrate {target} <- {origin}"]

        lines = [
            f"  {self._label('hydrated', color)}  {target} <- {origin}",
            f"  {self._label('deleted', color)}  {marker}",
        ]
        if self._verbose:
            lines.append(self._dim(f"           {outcome.bytes_copied} bytes sha256={outcome.sha256}"))
        return lines

    def _render_summary(self) -> str:
        r = self._result
        sep = "  " + "─" * 38
        lines = [
            "",
            f"  {ASCII_LOGO_LINES[0]}",
            f"  {RUN_SUMMARY_TITLE}{' (dry run)' if r.dry_run else ''}",
            sep,
            f"  Root        {r.root.as_posix()}",
            f"  Markers     {len(r.outcomes)} found",
        ]
        if r.dry_run:
            lines.append(f"  Pending     {len(r.pending)}")
        else:
            lines.append(f"  Hydrated    {len(r.hydrated)}")
        lines.append(f"  Failed      {len(r.failed)}{self._format_error_breakdown()}")
        if r.warnings:
            lines.append(f"  Warnings    {len(r.warnings)}")
        lines.append(f"  Duration    {r.duration_seconds:.3f}s")
        lines.append("")
        return "\n".join(lines)

    def _format_error_breakdown(self) -> str:
        counts = self._result.counts_by_error()
        if not counts:
            return ""
        return " (" + " · ".join(f"{code} {count}" for code, count in counts.items()) + ")"

    def _display(self, outcome: MarkerOutcome) -> str:
        return relative_display(outcome.marker, self._result.root) or ""

    def _label(self, text: str, color: str) -> str:
        padded = f"{text:<8}"
        return _colorize(padded, color) if self._color else padded

    def _dim(self, text: str) -> str:
        return _colorize(text, ANSI_DIM) if self._color else text
