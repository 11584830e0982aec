"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from archetype.settings import SnapshotSettings


@pytest.fixture(autouse=True)
def isolated_snapshot_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Run every test in local mode with snapshots under tmp_path."""
    monkeypatch.delenv("CI", raising=False)
    monkeypatch.setenv("ARCHETYPE_SNAPSHOT_DIR", str(tmp_path / "snapshots"))


@pytest.fixture
def snapshot_root(tmp_path: Path) -> Path:
    return tmp_path / "snapshots"


@pytest.fixture
def local_settings(snapshot_root: Path) -> SnapshotSettings:
    return SnapshotSettings(snapshot_root=snapshot_root, ci=False)


@pytest.fixture
def ci_settings(snapshot_root: Path) -> SnapshotSettings:
    return SnapshotSettings(snapshot_root=snapshot_root, ci=True)


@pytest.fixture
def output_capture() -> tuple[list[str], Callable[[str], None]]:
    """Collect lines written to an output sink."""
    lines: list[str] = []

    def sink(value: str) -> None:
        lines.append(value)

    return lines, sink
