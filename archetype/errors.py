"""Error taxonomy and exit code mapping for snapshot checks."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from archetype.core.diff import LineDiff


class ArchetypeError(Exception):
    """Base error for deterministic exit codes."""

    exit_code: int = 1


class ValidationError(ArchetypeError):
    """Invalid user input or command usage."""

    exit_code = 2


class InvalidSnapshotKey(ValidationError):
    """Snapshot key cannot be used as a filename."""


class MissingSnapshot(ArchetypeError, AssertionError):
    """Reference is absent and new snapshots may not be written (CI mode)."""

    def __init__(self, key: str, path: Path) -> None:
        super().__init__(f"snapshot missing for {key} (expected {path})")
        self.key = key
        self.path = path


class SnapshotMismatch(ArchetypeError, AssertionError):
    """Candidate payload differs from the stored reference."""

    def __init__(
        self,
        key: str,
        path: Path,
        diff: Optional[LineDiff] = None,
        detail: Optional[str] = None,
    ) -> None:
        message = f"snapshot mismatch at {path}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
        self.key = key
        self.path = path
        self.diff = diff


class IOFailure(ArchetypeError):
    """Filesystem or I/O failure while reading or writing a snapshot."""


class SerializationFailure(ArchetypeError):
    """Value could not be rendered to canonical text."""


def exit_code_for_exception(exc: BaseException) -> int:
    """Resolve a deterministic exit code for an exception."""
    if isinstance(exc, ArchetypeError):
        return exc.exit_code
    if isinstance(exc, OSError):
        return IOFailure.exit_code
    return ArchetypeError.exit_code
