"""Snapshot tests generated from fixtures, checked against committed references."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path, PurePosixPath

from archetype.registration import register_snapshot_tests

SNAPSHOT_ROOT = Path(__file__).resolve().parents[1] / "snapshots"


@dataclass(frozen=True)
class SearchByTerm:
    term: str
    type: str = "by-term"


@dataclass(frozen=True)
class SearchByIds:
    ids: tuple[int, ...]
    type: str = "by-ids"


class SortOrder(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"


def search_by_term() -> SearchByTerm:
    return SearchByTerm(term="an example search term")


def search_by_ids() -> SearchByIds:
    return SearchByIds(ids=(4, 7, 9))


def search_filters() -> dict:
    return {
        "order": SortOrder.DESCENDING,
        "paths": (PurePosixPath("a/b"),),
        "tags": {"b", "a"},
    }


register_snapshot_tests(
    globals(),
    search_by_term,
    search_by_ids,
    search_filters,
    snapshot_root=SNAPSHOT_ROOT,
)
