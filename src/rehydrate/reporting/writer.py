"""JSON report writer for hydration runs."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from rehydrate.constants.reporting import REPORT_TEMP_PREFIX, REPORT_TEMP_SUFFIX
from rehydrate.io import atomic_replace
from rehydrate.model import HydrationResult

logger = logging.getLogger(__name__)


def write_json_report(result: HydrationResult, path: Path) -> Path:
    """Write *result* as pretty-printed JSON to *path*, replacing it atomically."""
    with atomic_replace(path, temp_prefix=REPORT_TEMP_PREFIX, temp_suffix=REPORT_TEMP_SUFFIX) as handle:
        json.dump(result.to_dict(), handle, indent=2, sort_keys=True)
        handle.write("\n")
    logger.debug("Wrote hydration report to %s", path)
    return path
