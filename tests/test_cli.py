"""Tests for CLI parser and main behavior."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from rehydrate.cli.main import build_parser, main


def _dehydrated_tree(root: Path, *, with_missing: bool = False) -> Path:
    skill_dir = root / "skills" / "foo"
    skill_dir.mkdir(parents=True)
    (root / "BAR.md").write_text("hello", encoding="utf-8")
    (skill_dir / "FOO-replace.txt").write_text("../../BAR.md\n", encoding="utf-8")
    if with_missing:
        (skill_dir / "BAZ-replace.txt").write_text("../../MISSING.md\n", encoding="utf-8")
    return skill_dir


def test_parser_defaults_take_no_flags() -> None:
    args = build_parser().parse_args([])

    assert args.root is None
    assert args.config is None
    assert args.dry_run is False
    assert args.report is None


@pytest.mark.parametrize(
    ("short_args", "long_args"),
    [
        pytest.param(["-r", "skills"], ["--root", "skills"], id="root"),
        pytest.param(["-c", "rehydrate.yaml"], ["--config", "rehydrate.yaml"], id="config"),
        pytest.param(["-n"], ["--dry-run"], id="dry-run"),
        pytest.param(["-v"], ["--verbose"], id="verbose"),
        pytest.param(["-q"], ["--quiet"], id="quiet"),
    ],
)
def test_shorthand_equivalent_to_long_form(short_args: list[str], long_args: list[str]) -> None:
    parser = build_parser()

    assert vars(parser.parse_args(short_args)) == vars(parser.parse_args(long_args))


def test_verbose_and_quiet_are_exclusive() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["-v", "-q"])


def test_main_uses_current_directory(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    skill_dir = _dehydrated_tree(tmp_path)
    monkeypatch.chdir(tmp_path)

    exit_code = main(["--no-color"])

    assert exit_code == 0
    assert (skill_dir / "FOO.md").read_text(encoding="utf-8") == "hello"
    assert not (skill_dir / "FOO-replace.txt").exists()
    out = capsys.readouterr().out
    assert "hydrated  skills/foo/FOO.md <- BAR.md" in out
    assert "deleted   skills/foo/FOO-replace.txt" in out
    assert "Hydrated    1" in out


def test_main_reports_failures_with_exit_code(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    skill_dir = _dehydrated_tree(tmp_path, with_missing=True)

    exit_code = main(["--root", str(tmp_path), "--no-color"])

    assert exit_code == 1
    assert (skill_dir / "FOO.md").exists()
    assert (skill_dir / "BAZ-replace.txt").exists()
    out = capsys.readouterr().out
    assert "error     skills/foo/BAZ-replace.txt: [SourceNotFound]" in out
    assert "MISSING.md" in out
    assert "Failed      1 (SourceNotFound 1)" in out


def test_main_dry_run_leaves_tree_alone(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    skill_dir = _dehydrated_tree(tmp_path)

    exit_code = main(["-r", str(tmp_path), "-n", "--no-color"])

    assert exit_code == 0
    assert (skill_dir / "FOO-replace.txt").exists()
    assert not (skill_dir / "FOO.md").exists()
    assert "would     hydrate skills/foo/FOO.md <- BAR.md" in capsys.readouterr().out


def test_main_writes_json_report(tmp_path: Path) -> None:
    _dehydrated_tree(tmp_path / "root", with_missing=True)
    report = tmp_path / "out" / "report.json"

    exit_code = main(["-r", str(tmp_path / "root"), "--report", str(report), "-q"])

    payload = json.loads(report.read_text(encoding="utf-8"))
    assert exit_code == 1
    assert isinstance(payload, dict)
    assert payload["hydrated"] == 1
    assert payload["failed"] == 1
    assert payload["counts_by_error"] == {"SourceNotFound": 1}


def test_main_quiet_prints_no_report(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _dehydrated_tree(tmp_path)

    assert main(["-r", str(tmp_path), "-q"]) == 0
    assert capsys.readouterr().out == ""


def test_main_config_error_exits_2(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "rehydrate.yaml").write_text("unknown_key: true\n", encoding="utf-8")

    assert main(["-r", str(tmp_path)]) == 2
    assert "Configuration error" in capsys.readouterr().err


def test_main_missing_root_exits_1(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["-r", str(tmp_path / "missing")]) == 1
    assert "Hydration error" in capsys.readouterr().err


def test_main_no_markers_is_success(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["-r", str(tmp_path), "--no-color"]) == 0
    assert "Markers     0 found" in capsys.readouterr().out


def test_description_does_not_assume_default_marker_suffix() -> None:
    description = build_parser().description or ""

    assert "marker file" in description
    assert "-replace.txt" not in description
