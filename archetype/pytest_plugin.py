"""Pytest fixtures exposing the snapshot engine.

Enable with ``pytest_plugins = ["archetype.pytest_plugin"]`` in a conftest.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import pytest

from archetype.core.engine import SnapshotEngine
from archetype.settings import SnapshotSettings, load_settings


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("archetype", "snapshot testing")
    group.addoption(
        "--snapshot-dir",
        action="store",
        default=None,
        help="Snapshot root directory (relative paths resolve against the rootdir)",
    )


@pytest.fixture
def snapshot_settings(request: pytest.FixtureRequest) -> SnapshotSettings:
    """Settings for this test, read from the environment at setup time."""
    settings = load_settings()
    option = request.config.getoption("--snapshot-dir")
    if option:
        root = Path(option)
        if not root.is_absolute():
            root = Path(request.config.rootpath) / root
        settings = replace(settings, snapshot_root=root)
    return settings


@pytest.fixture
def snapshot(snapshot_settings: SnapshotSettings) -> SnapshotEngine:
    return SnapshotEngine(snapshot_settings)
