"""CLI entrypoint for silo."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from pathlib import Path

from silo import __version__
from silo.cli.handlers import (
    handle_complete,
    handle_list,
    handle_path,
    handle_resolve,
    handle_validate_config,
)
from silo.constants.branding import CLI_DESCRIPTION, PROG_NAME
from silo.exceptions import ConfigError, InventoryError, SiloError

HANDLERS: dict[str, Callable[[argparse.Namespace], int]] = {
    "list": handle_list,
    "resolve": handle_resolve,
    "path": handle_path,
    "complete": handle_complete,
    "validate-config": handle_validate_config,
}


def _add_inventory_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-i",
        "--inventory",
        type=Path,
        required=True,
        help="JSON file listing the silos to work on",
    )
    parser.add_argument(
        "-C",
        "--current-repo",
        type=Path,
        default=None,
        help="Main worktree of the repository you are in (prioritized when resolving)",
    )
    parser.add_argument("-c", "--config", type=Path, help="Explicit config file")


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog=PROG_NAME,
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug diagnostics")
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_cmd = subparsers.add_parser("list", help="List silos under their shortest unique names")
    _add_inventory_args(list_cmd)
    list_cmd.add_argument("-a", "--all", action="store_true", help="List silos of every repository")
    list_cmd.add_argument("--no-color", dest="color", action="store_false", help="Disable colored output")

    resolve = subparsers.add_parser("resolve", help="Print the storage path of a silo by name")
    resolve.add_argument("name", help="Silo name, optionally qualified (repo/name); '-' for the last silo")
    _add_inventory_args(resolve)

    path = subparsers.add_parser("path", help="Print the storage path for a new silo")
    path.add_argument("repo_path", type=Path, help="Main worktree of the repository")
    path.add_argument("branch", help="Branch (silo) name")
    path.add_argument("--repo-name", default=None, help="Repository name (defaults to the directory name)")
    path.add_argument("-c", "--config", type=Path, help="Explicit config file")

    complete = subparsers.add_parser("complete", help="Print shell completion candidates")
    _add_inventory_args(complete)

    validate = subparsers.add_parser("validate-config", help="Validate configuration")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    handler = HANDLERS.get(args.command)
    if handler is None:
        parser.error(f"Unsupported command: {args.command}")

    try:
        return handler(args)
    except (ConfigError, InventoryError) as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except SiloError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
