"""Command-line entry point: convert a checklist file to ADF JSON.

Usage:
    python -m casillas [FILE] [--indent-size N] [--pretty] [--verbose]

Reads FILE, or stdin when FILE is omitted or "-", and writes the ADF
document to stdout.
"""

from __future__ import annotations

import argparse
import logging
import sys

from casillas import Checklist, to_json
from casillas.errors import ConfigError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="casillas",
        description="Convert a GFM checklist into an ADF taskList document",
    )
    parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="Checklist Markdown file (default: stdin)",
    )
    parser.add_argument(
        "--indent-size",
        type=int,
        default=2,
        help="Spaces per nesting level (default: 2)",
    )
    parser.add_argument("--pretty", action="store_true", help="Indent the JSON output")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log debug output to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        checklist = Checklist(indent_size=args.indent_size)
    except ConfigError as e:
        parser.error(str(e))

    source_file = None
    if args.file == "-":
        source = sys.stdin.read()
    else:
        source_file = args.file
        try:
            with open(args.file, encoding="utf-8") as f:
                source = f.read()
        except OSError as e:
            parser.error(f"cannot read {args.file}: {e.strerror}")

    doc = checklist.convert(source, source_file=source_file)
    sys.stdout.write(to_json(doc, indent=2 if args.pretty else None))
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
