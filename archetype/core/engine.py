"""Snapshot lifecycle: capture on first run, compare afterwards."""

from __future__ import annotations

from enum import Enum
import logging
from pathlib import Path
from typing import Any, Callable, Optional

from archetype.core.canonical import canonical_json
from archetype.core.diff import LineDiff, render_diff
from archetype.core.paths import resolve_snapshot_path
from archetype.errors import IOFailure, MissingSnapshot, SnapshotMismatch, ValidationError
from archetype.settings import SnapshotSettings

logger = logging.getLogger(__name__)


class SnapshotOutcome(str, Enum):
    """Successful results of a snapshot check."""

    CAPTURED = "CAPTURED"
    MATCHED = "MATCHED"


def _decode(data: bytes) -> Optional[str]:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return None


class SnapshotEngine:
    """Compare payloads against references stored under settings.snapshot_root.

    A missing reference is written on first use, unless settings.ci is set,
    in which case the check fails. Existing references are never modified.
    """

    def __init__(
        self,
        settings: SnapshotSettings,
        *,
        output_sink: Callable[[str], Any] = print,
    ) -> None:
        self.settings = settings
        self._output_sink = output_sink

    def path_for(self, key: str) -> Path:
        return resolve_snapshot_path(self.settings.snapshot_root, key)

    def check_text(self, key: str, text: str) -> SnapshotOutcome:
        """Check UTF-8 text against the reference for key."""
        try:
            payload = text.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise ValidationError(f"Snapshot text for {key} is not encodable as UTF-8: {exc}") from exc
        path = self.path_for(key)
        if self._capture_if_absent(key, path, payload):
            return SnapshotOutcome.CAPTURED

        stored = _decode(self._read(path))
        if stored is None:
            logger.warning("Snapshot %s is not valid UTF-8 text", key)
            raise SnapshotMismatch(key, path, detail="stored snapshot is not valid UTF-8")
        return self._compare_text(key, path, stored, text)

    def check_bytes(self, key: str, data: bytes) -> SnapshotOutcome:
        """Check raw bytes; a diff is rendered only when both sides are UTF-8 text."""
        path = self.path_for(key)
        if self._capture_if_absent(key, path, data):
            return SnapshotOutcome.CAPTURED

        stored = self._read(path)
        if stored == data:
            logger.debug("Snapshot %s matched", key)
            return SnapshotOutcome.MATCHED

        stored_text = _decode(stored)
        candidate_text = _decode(data)
        if stored_text is not None and candidate_text is not None:
            return self._compare_text(key, path, stored_text, candidate_text)

        logger.warning("Binary snapshot %s differs", key)
        raise SnapshotMismatch(
            key,
            path,
            detail=f"binary payload differs: stored {len(stored)} bytes, got {len(data)} bytes",
        )

    def check_structured(self, key: str, value: Any) -> SnapshotOutcome:
        """Canonicalize value to JSON, then check it as text."""
        return self.check_text(key, canonical_json(value))

    def _capture_if_absent(self, key: str, path: Path, payload: bytes) -> bool:
        if path.exists():
            return False
        if self.settings.ci:
            logger.warning("Snapshot %s missing in CI mode", key)
            raise MissingSnapshot(key, path)
        try:
            # Exclusive create: a concurrent writer for the same key wins.
            handle = path.open("xb")
        except FileExistsError:
            logger.debug("Snapshot %s appeared during capture; comparing", key)
            return False
        except OSError as exc:
            raise IOFailure(f"Cannot write snapshot {path}: {exc}") from exc
        try:
            with handle:
                handle.write(payload)
        except OSError as exc:
            self._discard_partial(path)
            raise IOFailure(f"Cannot write snapshot {path}: {exc}") from exc
        logger.info("Captured new snapshot %s at %s", key, path)
        return True

    def _discard_partial(self, path: Path) -> None:
        # A partial file must not become the reference for the next run.
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            logger.warning("Could not remove partial snapshot %s: %s", path, exc)

    def _read(self, path: Path) -> bytes:
        try:
            return path.read_bytes()
        except OSError as exc:
            raise IOFailure(f"Cannot read snapshot {path}: {exc}") from exc

    def _compare_text(self, key: str, path: Path, stored: str, candidate: str) -> SnapshotOutcome:
        diff = LineDiff.from_texts(stored, candidate)
        if diff.ratio() == 1.0:
            logger.debug("Snapshot %s matched", key)
            return SnapshotOutcome.MATCHED

        logger.warning("Snapshot %s mismatch (ratio %.3f)", key, diff.ratio())
        for line in render_diff(key, diff):
            self._output_sink(line)
        raise SnapshotMismatch(key, path, diff=diff)
