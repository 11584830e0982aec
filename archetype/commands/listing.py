"""List command - show stored snapshot keys."""

from __future__ import annotations

from argparse import Namespace

from archetype.commands.check import resolve_settings
from archetype.commands.output import emit_output
from archetype.core.paths import list_snapshot_keys
from archetype.settings import SnapshotSettings


def run_list(args: Namespace, *, settings: SnapshotSettings | None = None, output_sink=print) -> int:
    settings = settings or resolve_settings(args)
    keys = list_snapshot_keys(settings.snapshot_root)
    emit_output(
        command="list",
        payload={"snapshot_root": str(settings.snapshot_root), "keys": keys},
        json_output=getattr(args, "json", False),
        output_sink=output_sink,
        human_lines=keys,
    )
    return 0
