"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "REHYDRATE"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ REHYDRATE",
    "     // restore dehydrated skill files",
)
RUN_SUMMARY_TITLE: str = "Hydration summary"
CLI_DESCRIPTION: str = "\n".join(
    (
        *ASCII_LOGO_LINES,
        "",
        f"{BRAND_NAME} replaces every marker file under the root with the file it points to.",
    )
)
