"""Snapshot key validation and key-to-path resolution."""

from __future__ import annotations

import logging
from pathlib import Path

from archetype.errors import InvalidSnapshotKey

logger = logging.getLogger(__name__)

SNAPSHOT_EXTENSION = "snap"

_FORBIDDEN_KEY_CHARS = ("/", "\\", "\x00")


def validate_key(key: str) -> None:
    if not isinstance(key, str) or not key:
        raise InvalidSnapshotKey(f"Invalid snapshot key: {key!r}")
    if key in {".", ".."} or any(ch in key for ch in _FORBIDDEN_KEY_CHARS):
        raise InvalidSnapshotKey(f"Invalid snapshot key: {key!r}")


def ensure_snapshot_root(root: Path) -> None:
    """Create the snapshot root if needed; failures surface on read/write."""
    try:
        root.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.debug("Could not create snapshot root %s: %s", root, exc)


def resolve_snapshot_path(root: Path, key: str) -> Path:
    """Map a key to <root>/<key>.snap, creating the root directory on demand."""
    validate_key(key)
    ensure_snapshot_root(root)
    return root / f"{key}.{SNAPSHOT_EXTENSION}"


def list_snapshot_keys(root: Path) -> list[str]:
    """Return the sorted keys of every stored snapshot under root."""
    if not root.is_dir():
        return []
    suffix = f".{SNAPSHOT_EXTENSION}"
    return sorted(
        path.name[: -len(suffix)]
        for path in root.iterdir()
        if path.is_file() and path.name.endswith(suffix) and len(path.name) > len(suffix)
    )
