"""Constants for report files, outcome codes, and stdout formatting."""

from __future__ import annotations

REPORT_TEMP_PREFIX: str = ".tmp-"
REPORT_TEMP_SUFFIX: str = ".json"

SCHEMA_VERSION: str = "1.0.0"

STATUS_HYDRATED: str = "hydrated"
STATUS_PENDING: str = "pending"
STATUS_FAILED: str = "failed"

ERROR_INVALID_MARKER: str = "InvalidMarker"
ERROR_SOURCE_NOT_FOUND: str = "SourceNotFound"
ERROR_WRITE_FAILURE: str = "WriteFailure"

ANSI_RED: str = "\033[31m"
ANSI_GREEN: str = "\033[32m"
ANSI_YELLOW: str = "\033[33m"
ANSI_DIM: str = "\033[2m"
ANSI_RESET: str = "\033[0m"

STATUS_COLORS: dict[str, str] = {
    STATUS_HYDRATED: ANSI_GREEN,
    STATUS_PENDING: ANSI_YELLOW,
    STATUS_FAILED: ANSI_RED,
}
