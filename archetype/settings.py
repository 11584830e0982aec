"""Snapshot settings: run mode and snapshot root."""

from __future__ import annotations

from dataclasses import dataclass
import json
import os
from pathlib import Path
from typing import Mapping, Optional


_DEFAULT_SNAPSHOT_DIR = "snapshots"
_SNAPSHOT_DIR_ENV = "ARCHETYPE_SNAPSHOT_DIR"
_CI_ENV = "CI"
_TRUTHY = {"1", "true", "yes"}
_ALLOWED_CONFIG_KEYS = {"snapshot_dir"}


@dataclass(frozen=True)
class SnapshotSettings:
    snapshot_root: Path
    ci: bool = False


def is_ci(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Return True when the environment selects strict (CI) run mode."""
    env = os.environ if environ is None else environ
    return env.get(_CI_ENV, "").strip().lower() in _TRUTHY


def load_settings(
    path: Optional[Path] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> SnapshotSettings:
    """Load settings from an optional JSON config file with environment overrides.

    Priority order:
    1. Environment variables
    2. JSON config file
    3. Defaults

    Run mode is only ever taken from the environment.

    Args:
        path: Path to JSON config file, or None for default_config_path()
        environ: Mapping to read instead of os.environ

    Returns:
        SnapshotSettings with resolved values
    """
    env = os.environ if environ is None else environ
    config_path = path if path is not None else default_config_path()

    json_settings: dict = {}
    if config_path.exists():
        json_settings = json.loads(config_path.read_text(encoding="utf-8"))
        if not isinstance(json_settings, dict):
            raise ValueError(f"Invalid config file {config_path}: expected object")
        unknown = sorted(set(json_settings) - _ALLOWED_CONFIG_KEYS)
        if unknown:
            raise ValueError(f"Unknown config keys in {config_path}: {', '.join(unknown)}")

    snapshot_dir = env.get(_SNAPSHOT_DIR_ENV) or json_settings.get("snapshot_dir", _DEFAULT_SNAPSHOT_DIR)
    if not isinstance(snapshot_dir, str) or not snapshot_dir:
        raise ValueError(f"Invalid snapshot_dir: {snapshot_dir!r}")

    root = Path(snapshot_dir)
    if not root.is_absolute():
        root = Path.cwd() / root

    return SnapshotSettings(snapshot_root=root, ci=is_ci(env))


def default_config_path() -> Path:
    return Path.cwd() / "archetype.json"
