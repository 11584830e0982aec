"""Unit tests for the process-level snapshot helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

import archetype
from archetype import (
    MissingSnapshot,
    SerializationFailure,
    SnapshotMismatch,
    SnapshotOutcome,
    SnapshotSettings,
    snapshot,
    snapshot_bytes,
    snapshot_json,
    snapshot_structured,
)


def test_snapshot_uses_environment_root(snapshot_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert snapshot("greet", "hello\n") is SnapshotOutcome.CAPTURED
    assert (snapshot_root / "greet.snap").read_text() == "hello\n"
    assert snapshot("greet", "hello\n") is SnapshotOutcome.MATCHED
    assert capsys.readouterr().out == ""


def test_mismatch_prints_diff_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    snapshot("greet", "hello\n")
    with pytest.raises(SnapshotMismatch):
        snapshot("greet", "hello world\n")

    out = capsys.readouterr().out
    assert out == (
        " ┏━━━━━━━━ greet ━━━━━\n"
        "-┃ hello\n"
        "+┃ hello world\n"
        " ┗━━━━━━━━ greet ━━━━━\n"
    )


def test_run_mode_is_read_on_every_call(monkeypatch: pytest.MonkeyPatch, snapshot_root: Path) -> None:
    snapshot("committed", "value\n")
    monkeypatch.setenv("CI", "true")

    assert snapshot("committed", "value\n") is SnapshotOutcome.MATCHED
    with pytest.raises(MissingSnapshot):
        snapshot("uncommitted", "value\n")
    assert not (snapshot_root / "uncommitted.snap").exists()

    monkeypatch.setenv("CI", "false")
    assert snapshot("uncommitted", "value\n") is SnapshotOutcome.CAPTURED


def test_explicit_settings_bypass_environment(tmp_path: Path) -> None:
    settings = SnapshotSettings(snapshot_root=tmp_path / "explicit", ci=False)
    assert snapshot("k", "v", settings=settings) is SnapshotOutcome.CAPTURED
    assert (tmp_path / "explicit" / "k.snap").exists()


def test_structured_round_trip(snapshot_root: Path) -> None:
    value = {"ids": [4, 7, 9], "type": "by-ids"}
    assert snapshot_structured("search", value) is SnapshotOutcome.CAPTURED
    assert snapshot_structured("search", value) is SnapshotOutcome.MATCHED


def test_snapshot_json_is_structured_alias() -> None:
    assert snapshot_json is snapshot_structured


def test_serialization_failure_happens_before_capture(snapshot_root: Path) -> None:
    with pytest.raises(SerializationFailure):
        snapshot_structured("broken", {"value": object()})
    assert not (snapshot_root / "broken.snap").exists()


def test_snapshot_bytes(snapshot_root: Path) -> None:
    assert snapshot_bytes("raw", b"\x89PNG") is SnapshotOutcome.CAPTURED
    assert snapshot_bytes("raw", b"\x89PNG") is SnapshotOutcome.MATCHED


def test_public_exports() -> None:
    assert archetype.__version__ == "0.1.0"
    for name in archetype.__all__:
        assert hasattr(archetype, name)
