"""Tests for JSON Schema validation of the hydration report."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema
import pytest

from rehydrate.constants.reporting import SCHEMA_VERSION
from rehydrate.hydrator import hydrate
from rehydrate.reporting import write_json_report

SCHEMA_PATH: Path = Path(__file__).resolve().parents[2] / "schemas" / "report.schema.json"


@pytest.fixture()
def report_schema() -> dict[str, Any]:
    """Load the report JSON Schema."""
    return json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))


@pytest.fixture()
def mixed_tree(tmp_path: Path) -> Path:
    """Build a tree with one hydratable, one missing, and one empty marker."""
    root = tmp_path / "consumer"
    skills = root / "skills"
    skills.mkdir(parents=True)
    (root / "BAR.md").write_text("hello", encoding="utf-8")
    (skills / "FOO-replace.txt").write_text("../BAR.md\n", encoding="utf-8")
    (skills / "BAZ-replace.txt").write_text("../MISSING.md\n", encoding="utf-8")
    (skills / "EMPTY-replace.txt").write_text("", encoding="utf-8")
    return root


def test_schema_is_valid(report_schema: dict[str, Any]) -> None:
    jsonschema.Draft202012Validator.check_schema(report_schema)


def test_report_matches_schema(tmp_path: Path, mixed_tree: Path, report_schema: dict[str, Any]) -> None:
    result = hydrate(mixed_tree)
    report_path = write_json_report(result, tmp_path / "report.json")

    payload = json.loads(report_path.read_text(encoding="utf-8"))

    jsonschema.validate(instance=payload, schema=report_schema)
    assert isinstance(payload, dict)
    assert payload["schema_version"] == SCHEMA_VERSION
    assert payload["markers_found"] == 3
    assert payload["counts_by_error"] == {"InvalidMarker": 1, "SourceNotFound": 1}


def test_dry_run_report_matches_schema(mixed_tree: Path, report_schema: dict[str, Any]) -> None:
    payload = hydrate(mixed_tree, dry_run=True).to_dict()

    jsonschema.validate(instance=payload, schema=report_schema)
    assert payload["pending"] == 1
    assert payload["hydrated"] == 0


def test_outcome_paths_are_relative_to_root(mixed_tree: Path) -> None:
    payload = hydrate(mixed_tree).to_dict()

    outcomes = {outcome["marker"]: outcome for outcome in payload["outcomes"]}  # type: ignore[union-attr, index]
    assert outcomes["skills/FOO-replace.txt"]["target"] == "skills/FOO.md"
    assert outcomes["skills/FOO-replace.txt"]["source"] == "BAR.md"
    assert outcomes["skills/BAZ-replace.txt"]["candidates"][0] == "MISSING.md"


def test_schema_rejects_unknown_status(mixed_tree: Path, report_schema: dict[str, Any]) -> None:
    payload = hydrate(mixed_tree, dry_run=True).to_dict()
    payload["outcomes"][0]["status"] = "skipped"  # type: ignore[index]

    with pytest.raises(jsonschema.ValidationError):
        jsonschema.validate(instance=payload, schema=report_schema)
