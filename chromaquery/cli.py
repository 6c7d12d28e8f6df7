# Copyright (c) 2026 Chromaquery
# SPDX-License-Identifier: MIT

"""
Command line entry point.

Usage::

    chromaquery "rgb(255, 0, 0, 50%)"
    chromaquery "#3941C8" --format table

Script Filter JSON goes to stdout and logs go to stderr, so the command
can be used directly as a launcher Script Filter. Swatch icons are
written to ``--cache-dir``, or to the directory named by the
``alfred_workflow_cache`` environment variable when run by Alfred.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional, Sequence

from chromaquery import __version__
from chromaquery.interpret import convert
from chromaquery.runtime import SerializerFormat, SwatchCache, to_script_filter, to_text_table

CACHE_DIR_ENV = "alfred_workflow_cache"

_FORMATS = {
    "json": SerializerFormat.JSON,
    "json_pretty": SerializerFormat.JSON_PRETTY,
    "natural": SerializerFormat.NATURAL,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chromaquery",
        description="Convert a typed color into hex, RGB, HSB and color literal forms.",
    )
    parser.add_argument("query", help='color to convert, e.g. "#FF0000" or "hsb 120 100 100"')
    parser.add_argument(
        "--format",
        choices=[*_FORMATS, "table"],
        default="json",
        help="output format (default: json)",
    )
    parser.add_argument(
        "--cache-dir",
        default=None,
        help=f"swatch icon directory (default: ${CACHE_DIR_ENV})",
    )
    parser.add_argument("--no-icons", action="store_true", help="do not render swatch icons")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _swatch_cache(args: argparse.Namespace) -> Optional[SwatchCache]:
    if args.no_icons or args.format == "table":
        return None
    cache_dir = args.cache_dir or os.environ.get(CACHE_DIR_ENV)
    if not cache_dir:
        return None
    return SwatchCache.at(cache_dir)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    representations = convert(args.query)

    if args.format == "table":
        output = to_text_table(representations)
    else:
        cache = _swatch_cache(args)
        output = to_script_filter(
            representations,
            format=_FORMATS[args.format],
            icon_for=cache.icon_path if cache is not None else None,
        )

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
