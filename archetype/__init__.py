"""Snapshot testing with builtin line diffing and test generation.

Mostly used for golden testing of JSON output, but any output that can be
expressed as UTF-8 text or raw bytes can be checked.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .api import snapshot, snapshot_bytes, snapshot_json, snapshot_structured
from .core.canonical import canonical_json
from .core.diff import Change, ChangeTag, LineDiff, render_diff
from .core.engine import SnapshotEngine, SnapshotOutcome
from .errors import (
    ArchetypeError,
    InvalidSnapshotKey,
    IOFailure,
    MissingSnapshot,
    SerializationFailure,
    SnapshotMismatch,
)
from .registration import register_snapshot_tests, snapshot_test
from .settings import SnapshotSettings, load_settings

__all__ = [
    "__version__",
    "snapshot",
    "snapshot_bytes",
    "snapshot_json",
    "snapshot_structured",
    "canonical_json",
    "Change",
    "ChangeTag",
    "LineDiff",
    "render_diff",
    "SnapshotEngine",
    "SnapshotOutcome",
    "ArchetypeError",
    "InvalidSnapshotKey",
    "IOFailure",
    "MissingSnapshot",
    "SerializationFailure",
    "SnapshotMismatch",
    "register_snapshot_tests",
    "snapshot_test",
    "SnapshotSettings",
    "load_settings",
]
