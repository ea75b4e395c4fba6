from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional, TextIO

from . import __version__
from .core.config import settings
from .core.logging import get_logger, setup_logging
from .models.schemas import DistanceUnit, GroupingOptions
from .services.log_pipeline import process_logs
from .services.similarity import group_by

logger = get_logger(__name__)


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="levgroup",
        description="Collapse near-duplicate lines by Levenshtein distance",
    )
    parser.add_argument("file", nargs="?", help="Input file (default: stdin)")
    parser.add_argument(
        "-t",
        "--tolerance",
        type=int,
        default=None,
        help=f"Allowed edit distance (default: {settings.default_tolerance})",
    )
    parser.add_argument(
        "-p",
        "--percentage",
        action="store_true",
        help="Read the tolerance as a percentage of the longer line",
    )
    parser.add_argument("--strip-digits", action="store_true", help="Ignore numbers when comparing")
    parser.add_argument("--strip-identifiers", action="store_true", help="Ignore GUIDs when comparing")
    parser.add_argument(
        "--logs",
        action="store_true",
        help="Parse the input as log lines and cluster per service and level",
    )
    parser.add_argument("--top-k", type=_positive_int, default=settings.top_k, help="Clusters to print in --logs mode")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of text")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def options_from_args(args: argparse.Namespace) -> GroupingOptions:
    tolerance = settings.default_tolerance if args.tolerance is None else args.tolerance
    if tolerance < 0:
        raise argparse.ArgumentTypeError("tolerance must be >= 0")
    return GroupingOptions(
        unit=DistanceUnit.PERCENTAGE if args.percentage else DistanceUnit.ABSOLUTE,
        tolerance=tolerance,
        strip_digits=args.strip_digits,
        strip_identifiers=args.strip_identifiers,
    )


def _read_input(path: Optional[str]) -> str:
    if not path or path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return f.read()


def _print_lines(text: str, options: GroupingOptions, as_json: bool, out: TextIO) -> None:
    lines = [line for line in text.splitlines() if line.strip()]
    groups = group_by(lines, options)
    groups.sort(key=lambda g: g.count, reverse=True)
    if as_json:
        json.dump([{"key": g.key, "count": g.count, "items": g.items} for g in groups], out, indent=2)
        out.write("\n")
        return
    for g in groups:
        out.write(f"{g.count}\t{g.key}\n")


def _print_logs(text: str, options: GroupingOptions, top_k: int, as_json: bool, out: TextIO) -> None:
    summaries = process_logs(text, options, top_k=top_k)
    if as_json:
        json.dump(summaries, out, indent=2)
        out.write("\n")
        return
    for s in summaries:
        out.write(f"{s['count']}\t{s['service']}\t{s['level']}\t{s['representative']}\n")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging("DEBUG" if args.verbose else None)

    try:
        options = options_from_args(args)
    except argparse.ArgumentTypeError as exc:
        parser.error(str(exc))

    try:
        text = _read_input(args.file)
    except OSError as exc:
        print(f"levgroup: cannot read {args.file}: {exc}", file=sys.stderr)
        return 2

    logger.debug(f"Read {len(text)} characters from {args.file or 'stdin'}")

    if args.logs:
        _print_logs(text, options, args.top_k, args.json, sys.stdout)
    else:
        _print_lines(text, options, args.json, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
