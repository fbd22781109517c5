"""Interface for ``python -m nestkit``."""

from __future__ import annotations

import json
import logging
import sys
from argparse import ArgumentParser, Namespace
from typing import TYPE_CHECKING, Any

from ._version import version
from .paths import DEFAULT_SEP, MISSING, get_path
from .structural import common_keys, deep_merge, diff, flatten, unflatten


if TYPE_CHECKING:
    from collections.abc import Sequence


__all__ = ["main"]

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _load(source: str) -> Any:
    if source == "-":
        return json.load(sys.stdin)
    with open(source, encoding="utf-8") as handle:
        return json.load(handle)


def _dump(value: Any) -> None:
    json.dump(value, sys.stdout, indent=2)
    _ = sys.stdout.write("\n")


def _run(parser: ArgumentParser, options: Namespace) -> Any:
    match options.command:
        case "flatten":
            return flatten(_load(options.file), sep=options.sep)
        case "unflatten":
            return unflatten(_load(options.file), sep=options.sep)
        case "merge":
            return deep_merge(*(_load(source) for source in options.files))
        case "diff":
            return diff(_load(options.a), _load(options.b), sep=options.sep)
        case "common-keys":
            return common_keys(_load(options.a), _load(options.b))
        case "get":
            value = get_path(_load(options.file), options.path, sep=options.sep)
            if value is MISSING:
                parser.exit(1, f"path not found: {options.path}\n")
            return value
    parser.error(f"unknown command: {options.command}")
    return None


def build_parser() -> ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = ArgumentParser(prog="nestkit", description="Transform nested JSON documents.")
    _ = parser.add_argument("-v", "--version", action="version", version=version)
    _ = parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=_LOG_LEVELS,
        help="root logging level (default: %(default)s)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    flatten_cmd = commands.add_parser("flatten", help="flatten a JSON object into dotted keys")
    _ = flatten_cmd.add_argument("file", help="JSON file, or - for stdin")
    unflatten_cmd = commands.add_parser("unflatten", help="rebuild a nested object from dotted keys")
    _ = unflatten_cmd.add_argument("file", help="JSON file, or - for stdin")
    get_cmd = commands.add_parser("get", help="print the value at a dotted path")
    _ = get_cmd.add_argument("file", help="JSON file, or - for stdin")
    _ = get_cmd.add_argument("path", help="dotted path to look up")
    merge_cmd = commands.add_parser("merge", help="deep merge JSON objects, later files win")
    _ = merge_cmd.add_argument("files", nargs="+", help="JSON files, or - for stdin")
    diff_cmd = commands.add_parser("diff", help="leaves of A missing from or different in B")
    _ = diff_cmd.add_argument("a")
    _ = diff_cmd.add_argument("b")
    common_cmd = commands.add_parser("common-keys", help="top-level keys present in both A and B")
    _ = common_cmd.add_argument("a")
    _ = common_cmd.add_argument("b")

    for command in (flatten_cmd, unflatten_cmd, get_cmd, diff_cmd):
        _ = command.add_argument("--sep", default=DEFAULT_SEP, help="path separator (default: %(default)s)")
    return parser


def main(args: Sequence[str] | None = None) -> None:
    """Argument parser for the CLI."""
    parser = build_parser()
    options = parser.parse_args(args)
    logging.basicConfig(level=options.log_level, format="%(levelname)s %(name)s: %(message)s")
    logger.debug("Running %s", options.command)
    try:
        result = _run(parser, options)
    except (OSError, ValueError) as error:
        parser.exit(2, f"nestkit: error: {error}\n")
    _dump(result)


if __name__ == "__main__":
    main()
