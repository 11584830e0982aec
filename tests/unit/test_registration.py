"""Unit tests for generated snapshot tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from archetype.errors import MissingSnapshot, SnapshotMismatch
from archetype.registration import register_snapshot_tests, snapshot_test


def search_by_ids() -> dict:
    return {"type": "by-ids", "ids": [4, 7, 9]}


def test_generated_test_is_named_after_fixture() -> None:
    generated = snapshot_test(search_by_ids)
    assert generated.__name__ == "test_snapshot_search_by_ids"
    assert generated.__module__ == __name__


def test_generated_test_captures_then_matches(snapshot_root: Path) -> None:
    generated = snapshot_test(search_by_ids)
    generated()
    assert (snapshot_root / "search_by_ids.snap").read_text() == (
        '{\n  "ids": [\n    4,\n    7,\n    9\n  ],\n  "type": "by-ids"\n}\n'
    )
    generated()


def test_generated_test_fails_when_fixture_output_changes(snapshot_root: Path) -> None:
    snapshot_test(search_by_ids)()
    snapshot_root.joinpath("search_by_ids.snap").write_text('{\n  "ids": []\n}\n')

    with pytest.raises(SnapshotMismatch):
        snapshot_test(search_by_ids)()


def test_generated_test_honours_ci_mode(monkeypatch: pytest.MonkeyPatch, snapshot_root: Path) -> None:
    monkeypatch.setenv("CI", "true")
    with pytest.raises(MissingSnapshot):
        snapshot_test(search_by_ids)()
    assert not snapshot_root.joinpath("search_by_ids.snap").exists()


def test_explicit_snapshot_root(tmp_path: Path) -> None:
    root = tmp_path / "pinned"
    snapshot_test(search_by_ids, snapshot_root=root)()
    assert (root / "search_by_ids.snap").exists()


def test_register_installs_tests_into_namespace() -> None:
    def search_by_term() -> dict:
        return {"type": "by-term", "term": "cats"}

    namespace: dict = {}
    names = register_snapshot_tests(namespace, search_by_ids, search_by_term)

    assert names == ["test_snapshot_search_by_ids", "test_snapshot_search_by_term"]
    assert set(namespace) == set(names)
    assert all(callable(test) for test in namespace.values())


def test_register_rejects_duplicates() -> None:
    namespace: dict = {}
    register_snapshot_tests(namespace, search_by_ids)
    with pytest.raises(ValueError, match="Duplicate snapshot test"):
        register_snapshot_tests(namespace, search_by_ids)
