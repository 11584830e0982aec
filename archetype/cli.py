"""Command-line interface for archetype."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from archetype import __version__


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--snapshot-dir",
        type=Path,
        help="Snapshot root directory (default: ./snapshots or $ARCHETYPE_SNAPSHOT_DIR)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Settings path (default: ./archetype.json)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit machine-readable JSON output",
    )


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="archetype",
        description="Snapshot testing with line-level diffs",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"archetype {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    check_parser = subparsers.add_parser(
        "check",
        help="Compare a file against the snapshot stored under KEY",
    )
    check_parser.add_argument("key", help="Snapshot key")
    check_parser.add_argument("file", type=Path, help="File whose content is checked")
    check_parser.add_argument(
        "--ci",
        action="store_true",
        help="Fail instead of writing a missing snapshot (also enabled by CI=true)",
    )
    check_parser.add_argument(
        "--binary",
        action="store_true",
        help="Compare raw bytes instead of UTF-8 text",
    )
    _add_common_arguments(check_parser)

    list_parser = subparsers.add_parser(
        "list",
        help="List stored snapshot keys",
    )
    _add_common_arguments(list_parser)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        if args.command == "check":
            from .commands.check import run_check
            return run_check(args)
        elif args.command == "list":
            from .commands.listing import run_list
            return run_list(args)
        else:
            parser.print_help()
            return 1
    except Exception as exc:
        from .errors import exit_code_for_exception

        print(str(exc), file=sys.stderr)
        return exit_code_for_exception(exc)


if __name__ == "__main__":
    sys.exit(main())
