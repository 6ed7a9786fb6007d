#!/usr/bin/env python3
"""
fontconfirm – cli.py
====================

Command-line front end.

Commands
--------
``list``
    Scan the font directories and print one discovered file per line.
``show``
    Parse one font file (given by path, or by ``--index`` into the listing)
    and print its name-table metadata, one labeled line per field.

Exit status is 0 on success and 1 when a font cannot be parsed, an index is
out of range, or the configuration file is unusable.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from fontconfirm.config import resolve_directories
from fontconfirm.errors import ConfigError, FontParseError
from fontconfirm.extract_metadata import extract_font_metadata, is_collection
from fontconfirm.observer import Observer, VerbosePrinter
from fontconfirm.present import render_detail, render_listing, select_font_path
from fontconfirm.scan_fonts import scan_font_directories


def _error(message: str) -> int:
    print(f"❌ Error: {message}", file=sys.stderr)
    return 1


def _add_search_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help='JSON file with a "directories" list, used when no directory is given',
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Report skipped directories, scan totals and parse failures on stderr",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fontconfirm",
        description="List font files and show their name-table metadata.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_list = sub.add_parser(
        "list",
        help="List font files found in the font directories",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    p_list.add_argument(
        "directories",
        nargs="*",
        help="Directories to scan (default: configured font directories)",
    )
    p_list.add_argument(
        "--numbered",
        action="store_true",
        help="Prefix each file with its index, for use with 'show --index'",
    )
    p_list.add_argument(
        "--paths",
        action="store_true",
        help="Print absolute paths instead of file names",
    )
    _add_search_options(p_list)

    p_show = sub.add_parser(
        "show",
        help="Show metadata of one font file",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    p_show.add_argument("path", nargs="?", help="Font file to inspect")
    p_show.add_argument(
        "--index",
        type=int,
        default=None,
        help="Inspect the N-th file of the listing instead of PATH",
    )
    p_show.add_argument(
        "--dir",
        dest="directories",
        action="append",
        default=None,
        help="Directory to scan with --index (repeatable)",
    )
    p_show.add_argument(
        "--json",
        action="store_true",
        help="Print the metadata as JSON",
    )
    _add_search_options(p_show)

    return parser


def cmd_list(args: argparse.Namespace, observer: Observer | None) -> int:
    directories = resolve_directories(args.directories, args.config)
    entries = scan_font_directories(directories, observer=observer)

    if args.paths:
        lines = [entry.path for entry in entries]
    else:
        lines = render_listing(entries, numbered=args.numbered)
    for line in lines:
        print(line)
    return 0


def cmd_show(args: argparse.Namespace, observer: Observer | None) -> int:
    if (args.path is None) == (args.index is None):
        return _error("give either PATH or --index")
    if args.path is not None and (args.directories or args.config):
        return _error("--dir and --config only apply with --index")

    if args.index is not None:
        directories = resolve_directories(args.directories, args.config)
        entries = scan_font_directories(directories, observer=observer)
        font_path = select_font_path(entries, args.index)
    else:
        font_path = args.path

    records = extract_font_metadata(font_path, observer=observer)
    collection = is_collection(font_path)

    if args.json:
        payload = {
            "path": str(Path(font_path).absolute()),
            "collection": collection,
            "fonts": [record.as_dict() for record in records],
        }
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        for line in render_detail(font_path, records, collection=collection):
            print(line)
    return 0


def run(argv: list[str] | None = None) -> int:
    """Parse ``argv`` and run the selected command, returning the exit status."""
    args = build_parser().parse_args(argv)
    observer: Observer | None = VerbosePrinter() if args.verbose else None

    try:
        if args.command == "list":
            return cmd_list(args, observer)
        return cmd_show(args, observer)
    except FontParseError as e:
        return _error(f"cannot parse font: {e.path} ({e.reason})")
    except (ConfigError, IndexError) as e:
        return _error(str(e))


def main() -> None:
    """CLI entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
