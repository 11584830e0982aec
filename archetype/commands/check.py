"""Check command - compare a file against a stored snapshot."""

from __future__ import annotations

from argparse import Namespace
from dataclasses import replace
from pathlib import Path

from archetype.commands.output import MISMATCH_STATUS, check_result, emit_check_result
from archetype.core.engine import SnapshotEngine
from archetype.errors import IOFailure, SnapshotMismatch, ValidationError
from archetype.settings import SnapshotSettings, load_settings


def resolve_settings(args: Namespace) -> SnapshotSettings:
    settings = load_settings(getattr(args, "config", None))
    snapshot_dir = getattr(args, "snapshot_dir", None)
    if snapshot_dir is not None:
        settings = replace(settings, snapshot_root=Path(snapshot_dir).absolute())
    return settings


def _read_input(path: Path) -> bytes:
    if not path.is_file():
        raise ValidationError(f"Input file not found: {path}")
    try:
        return path.read_bytes()
    except OSError as exc:
        raise IOFailure(f"Cannot read input {path}: {exc}") from exc


def run_check(args: Namespace, *, settings: SnapshotSettings | None = None, output_sink=print) -> int:
    """Check the content of args.file against the snapshot for args.key."""
    settings = settings or resolve_settings(args)
    if getattr(args, "ci", False):
        settings = replace(settings, ci=True)
    json_output = getattr(args, "json", False)
    data = _read_input(Path(args.file))

    diff_lines: list[str] = []
    # In JSON mode the rendered diff travels inside the envelope.
    engine = SnapshotEngine(settings, output_sink=diff_lines.append if json_output else output_sink)
    path = engine.path_for(args.key)

    try:
        if getattr(args, "binary", False):
            outcome = engine.check_bytes(args.key, data)
        else:
            try:
                text = data.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise ValidationError(f"Input {args.file} is not valid UTF-8; use --binary") from exc
            outcome = engine.check_text(args.key, text)
    except SnapshotMismatch as exc:
        result = check_result(
            key=args.key,
            path=path,
            ci=settings.ci,
            status=MISMATCH_STATUS,
            diff=diff_lines,
            error=str(exc),
        )
        emit_check_result(result, json_output=json_output, output_sink=output_sink)
        raise

    result = check_result(key=args.key, path=path, ci=settings.ci, status=outcome.value)
    emit_check_result(result, json_output=json_output, output_sink=output_sink)
    return 0
