"""Output contract for snapshot commands.

Human mode prints one status line per check (plus the rendered diff, which
the engine writes itself). JSON mode prints a single envelope per command:

    {"schema_version": "v1", "command": "check", "data": {...}}

For `check`, `data` always carries key, path, ci and status; a mismatch
adds the rendered diff lines and the failure message.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, Optional, Sequence

SCHEMA_VERSION = "v1"
MISMATCH_STATUS = "MISMATCH"


def _envelope(command: str, data: dict) -> str:
    return json.dumps(
        {"schema_version": SCHEMA_VERSION, "command": command, "data": data},
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=True,
    )


def emit_output(
    *,
    command: str,
    payload: dict,
    json_output: bool,
    output_sink=print,
    human_lines: Iterable[str] = (),
) -> None:
    """Emit a JSON envelope or human-readable lines."""
    if json_output:
        output_sink(_envelope(command, payload))
        return
    for line in human_lines:
        output_sink(line)


def check_result(
    *,
    key: str,
    path: Path,
    ci: bool,
    status: str,
    diff: Sequence[str] = (),
    error: Optional[str] = None,
) -> dict:
    result = {"key": key, "path": str(path), "ci": ci, "status": status}
    if status == MISMATCH_STATUS:
        result["diff"] = list(diff)
        result["error"] = error
    return result


def emit_check_result(result: dict, *, json_output: bool, output_sink=print) -> None:
    """Report one snapshot check. Mismatches print nothing in human mode."""
    if json_output:
        output_sink(_envelope("check", result))
    elif result["status"] != MISMATCH_STATUS:
        output_sink(f"{result['key']}: {result['status'].lower()}")
