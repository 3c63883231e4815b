"""Shared pytest fixtures for building dehydrated workspaces."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture()
def workspace(tmp_path: Path) -> Path:
    """Return a parent directory holding the consumer project and its siblings."""
    path = tmp_path / "work"
    path.mkdir()
    return path


@pytest.fixture()
def project_root(workspace: Path) -> Path:
    """Return the consumer project root with an empty ``skills`` folder."""
    root = workspace / "consumer"
    (root / "skills").mkdir(parents=True)
    return root


@pytest.fixture()
def write_marker() -> Callable[[Path, str, str], Path]:
    """Return a helper that writes ``<name>-replace.txt`` holding *reference*."""

    def _write(directory: Path, name: str, reference: str) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        marker = directory / f"{name}-replace.txt"
        marker.write_text(f"{reference}\n", encoding="utf-8")
        return marker

    return _write
