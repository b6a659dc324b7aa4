#!/usr/bin/env python3
"""
Unified CLI for the bitmap filter toolkit.

Usage:
    bmpf filters                          # List filters and their parameters
    bmpf apply <filter> <in> <out>        # Apply one filter to a BMP file
    bmpf apply lighten in.bmp out.bmp --scale 0.5
    bmpf apply rotate in.bmp out.bmp --turns 3
    bmpf apply enlarge in.bmp out.bmp --x 2 --y 3
    bmpf info <file>                      # Show header fields and validity
    bmpf menu [<file>]                    # Interactive processing menu
"""

import argparse
import logging
import sys

from logging_utils import configure_logging, add_logging_args
from cli.apply import add_apply_subparser
from cli.filters import add_filters_subparser
from cli.info import add_info_subparser
from cli.menu import add_menu_subparser

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bmpf",
        description="Bitmap filters - apply pixel transforms to uncompressed BMP images",
    )
    add_logging_args(parser)
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    add_filters_subparser(subparsers)
    add_apply_subparser(subparsers)
    add_info_subparser(subparsers)
    add_menu_subparser(subparsers)
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level, args.verbose, args.quiet)

    cmd = getattr(args, "_cmd", None)
    if cmd is None:
        parser.print_help()
        return 1
    return cmd(args)


if __name__ == "__main__":
    sys.exit(main())
