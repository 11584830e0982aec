"""Canonical JSON rendering for structured snapshot values."""

from __future__ import annotations

from dataclasses import asdict, is_dataclass
from enum import Enum
import json
from pathlib import PurePath
from typing import Any

from archetype.errors import SerializationFailure


def _to_jsonable(obj: Any) -> Any:
    if is_dataclass(obj) and not isinstance(obj, type):
        return _to_jsonable(asdict(obj))
    if isinstance(obj, Enum):
        return _to_jsonable(obj.value)
    if isinstance(obj, PurePath):
        return str(obj)
    if isinstance(obj, dict):
        return {key: _to_jsonable(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_to_jsonable(item) for item in obj]
    if isinstance(obj, (set, frozenset)):
        items = [_to_jsonable(item) for item in obj]
        return sorted(items, key=lambda item: json.dumps(item, sort_keys=True))
    return obj


def canonical_json(value: Any) -> str:
    """Serialize a value with stable key ordering and two-space indentation."""
    try:
        payload = _to_jsonable(value)
        rendered = json.dumps(payload, sort_keys=True, indent=2, ensure_ascii=False, allow_nan=False)
        # Lone surrogates survive ensure_ascii=False but cannot be stored.
        rendered.encode("utf-8")
    except (TypeError, ValueError, RecursionError) as exc:
        raise SerializationFailure(f"Cannot serialize {type(value).__name__}: {exc}") from exc
    return rendered + "\n"
