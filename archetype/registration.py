"""Generate one pytest test per snapshot fixture."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Any, Callable, MutableMapping, Optional

from archetype.api import snapshot_structured
from archetype.settings import load_settings

TEST_PREFIX = "test_snapshot_"


def snapshot_test(
    fixture: Callable[[], Any],
    *,
    snapshot_root: Optional[Path] = None,
) -> Callable[[], None]:
    """Create a test that snapshots fixture() under the fixture's name.

    The fixture must be uniquely named and take no arguments.
    """
    name = fixture.__name__

    def _test() -> None:
        settings = load_settings()
        if snapshot_root is not None:
            settings = replace(settings, snapshot_root=snapshot_root)
        snapshot_structured(name, fixture(), settings=settings)

    _test.__name__ = f"{TEST_PREFIX}{name}"
    _test.__qualname__ = _test.__name__
    _test.__doc__ = f"Snapshot of {name}()."
    _test.__module__ = getattr(fixture, "__module__", _test.__module__)
    return _test


def register_snapshot_tests(
    namespace: MutableMapping[str, Any],
    *fixtures: Callable[[], Any],
    snapshot_root: Optional[Path] = None,
) -> list[str]:
    """Install generated tests into a module namespace, usually globals()."""
    names: list[str] = []
    for fixture in fixtures:
        test = snapshot_test(fixture, snapshot_root=snapshot_root)
        if test.__name__ in namespace:
            raise ValueError(f"Duplicate snapshot test: {test.__name__}")
        namespace[test.__name__] = test
        names.append(test.__name__)
    return names
