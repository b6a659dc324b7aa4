"""Header inspection CLI command."""

from __future__ import annotations

import argparse
import logging

from bitmap import read_bitmap

logger = logging.getLogger(__name__)


def add_info_subparser(subparsers: argparse._SubParsersAction) -> None:
    info_parser = subparsers.add_parser(
        "info",
        help="Show the header fields of a bitmap and whether it decodes",
    )
    info_parser.add_argument("path", help="BMP file to inspect")
    info_parser.set_defaults(_cmd=cmd_info)


def cmd_info(args: argparse.Namespace) -> int:
    result = read_bitmap(args.path)
    if result.header is None:
        logger.error("%s", result.error)
        return 1

    header = result.header
    for name, value in header.to_dict().items():
        logger.info("%-18s %s", name, value)
    logger.info("%-18s %s", "row_stride", header.row_stride)
    logger.info("%-18s %s", "expected_size", header.expected_file_size)

    if not result.ok:
        logger.error("Not a valid image: %s", result.error)
        return 1

    logger.info("Valid %dx%d image", header.width, header.height)
    return 0
