"""Line-level diff between a stored reference and a candidate payload."""

from __future__ import annotations

from dataclasses import dataclass
import difflib
from enum import Enum


class ChangeTag(str, Enum):
    """Kind of a single aligned line."""

    DELETE = "DELETE"
    INSERT = "INSERT"
    EQUAL = "EQUAL"


MARKERS = {
    ChangeTag.DELETE: "-┃ ",
    ChangeTag.INSERT: "+┃ ",
    ChangeTag.EQUAL: " ┃ ",
}

_BANNER_RULE = "━━━━━━━━"
_BANNER_TAIL = "━━━━━"


def split_lines(text: str) -> tuple[str, ...]:
    """Split on "\\n" only, keeping terminators; a final unterminated line is kept."""
    pieces = text.split("\n")
    lines = [piece + "\n" for piece in pieces[:-1]]
    if pieces[-1]:
        lines.append(pieces[-1])
    return tuple(lines)


@dataclass(frozen=True)
class Change:
    tag: ChangeTag
    value: str


@dataclass(frozen=True)
class LineDiff:
    """Aligned change records for two texts, in document order."""

    old_lines: tuple[str, ...]
    new_lines: tuple[str, ...]
    changes: tuple[Change, ...]
    matched_lines: int

    @classmethod
    def from_texts(cls, old: str, new: str) -> LineDiff:
        old_lines = split_lines(old)
        new_lines = split_lines(new)
        matcher = difflib.SequenceMatcher(None, old_lines, new_lines, autojunk=False)

        changes: list[Change] = []
        matched = 0
        for opcode, i1, i2, j1, j2 in matcher.get_opcodes():
            if opcode == "equal":
                matched += i2 - i1
                changes.extend(Change(ChangeTag.EQUAL, line) for line in old_lines[i1:i2])
                continue
            # Replaced blocks list deletions before insertions.
            if opcode in ("delete", "replace"):
                changes.extend(Change(ChangeTag.DELETE, line) for line in old_lines[i1:i2])
            if opcode in ("insert", "replace"):
                changes.extend(Change(ChangeTag.INSERT, line) for line in new_lines[j1:j2])

        return cls(
            old_lines=old_lines,
            new_lines=new_lines,
            changes=tuple(changes),
            matched_lines=matched,
        )

    def ratio(self) -> float:
        """Similarity in [0, 1]; exactly 1.0 only for identical line sequences."""
        total = len(self.old_lines) + len(self.new_lines)
        if total == 0:
            return 1.0
        return 2.0 * self.matched_lines / total

    def has_changes(self) -> bool:
        return any(change.tag is not ChangeTag.EQUAL for change in self.changes)


def _strip_terminator(value: str) -> str:
    if value.endswith("\r\n"):
        return value[:-2]
    if value.endswith("\n"):
        return value[:-1]
    return value


def render_header(key: str) -> str:
    return f" ┏{_BANNER_RULE} {key} {_BANNER_TAIL}"


def render_footer(key: str) -> str:
    return f" ┗{_BANNER_RULE} {key} {_BANNER_TAIL}"


def render_diff(key: str, diff: LineDiff) -> list[str]:
    """Render a key-labeled, bracketed diff block, one output line per change."""
    lines = [render_header(key)]
    for change in diff.changes:
        lines.append(f"{MARKERS[change.tag]}{_strip_terminator(change.value)}")
    lines.append(render_footer(key))
    return lines
