"""Filter listing CLI command."""

from __future__ import annotations

import argparse
import logging

from filters import FILTERS

logger = logging.getLogger(__name__)


def add_filters_subparser(subparsers: argparse._SubParsersAction) -> None:
    filters_parser = subparsers.add_parser(
        "filters",
        help="List available filters and their parameters",
    )
    filters_parser.set_defaults(_cmd=cmd_filters)


def cmd_filters(args: argparse.Namespace) -> int:
    logger.info("%-3s %-14s %-32s %s", "#", "Key", "Name", "Parameters")
    logger.info("%s", "-" * 70)
    for index, spec in enumerate(FILTERS, start=1):
        logger.info(
            "%-3s %-14s %-32s %s",
            index,
            spec.key,
            spec.display_name,
            ", ".join(spec.param_names) or "-",
        )
    return 0
