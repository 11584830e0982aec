"""Process-level snapshot helpers for use inside tests."""

from __future__ import annotations

from typing import Any, Optional

from archetype.core.engine import SnapshotEngine, SnapshotOutcome
from archetype.settings import SnapshotSettings, load_settings


def _engine(settings: Optional[SnapshotSettings]) -> SnapshotEngine:
    # Environment is read per call so CI mode is never cached.
    return SnapshotEngine(settings if settings is not None else load_settings())


def snapshot(key: str, text: str, *, settings: Optional[SnapshotSettings] = None) -> SnapshotOutcome:
    """Take a snapshot of UTF-8 text stored under `key`.

    On first run the text is written (or, in CI mode, the check fails
    because the reference was never committed). Otherwise the stored text
    is compared line by line; differences are printed and raise
    SnapshotMismatch.
    """
    return _engine(settings).check_text(key, text)


def snapshot_bytes(key: str, data: bytes, *, settings: Optional[SnapshotSettings] = None) -> SnapshotOutcome:
    """Take a snapshot of raw bytes stored under `key`."""
    return _engine(settings).check_bytes(key, data)


def snapshot_structured(key: str, value: Any, *, settings: Optional[SnapshotSettings] = None) -> SnapshotOutcome:
    """Take a snapshot of `value` rendered as canonical JSON."""
    return _engine(settings).check_structured(key, value)


snapshot_json = snapshot_structured
