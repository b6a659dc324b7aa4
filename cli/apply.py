"""Apply command CLI parsing and control flow."""

from __future__ import annotations

import argparse
import logging

from filters import apply_filter, get_filter

logger = logging.getLogger(__name__)


def add_apply_subparser(subparsers: argparse._SubParsersAction) -> None:
    apply_parser = subparsers.add_parser(
        "apply",
        help="Apply one filter to a bitmap and write the result",
    )
    apply_parser.add_argument(
        "filter",
        help="Filter key or menu number (see 'bmpf filters')",
    )
    apply_parser.add_argument("input", help="Input BMP file")
    apply_parser.add_argument("output", help="Output BMP file")
    apply_parser.add_argument(
        "--scale",
        help="Scaling factor in (0, 1] for clarendon, lighten and darken",
    )
    apply_parser.add_argument(
        "--turns",
        help="Number of 90 degree clockwise rotations for rotate",
    )
    apply_parser.add_argument(
        "--x",
        dest="x_scale",
        help="Horizontal enlarge factor (integer >= 1)",
    )
    apply_parser.add_argument(
        "--y",
        dest="y_scale",
        help="Vertical enlarge factor (integer >= 1)",
    )
    apply_parser.set_defaults(_cmd=cmd_apply)


def cmd_apply(args: argparse.Namespace) -> int:
    try:
        spec = get_filter(args.filter)
    except KeyError as exc:
        logger.error("%s", exc.args[0])
        return 1

    raw = {
        "scale": args.scale,
        "turns": args.turns,
        "x_scale": args.x_scale,
        "y_scale": args.y_scale,
    }
    try:
        step = spec.build(**spec.parse_params(raw))
    except ValueError as exc:
        logger.error("%s", exc)
        return 1

    result = apply_filter(args.input, args.output, step)
    if not result.ok:
        logger.error("%s", result.error)
        return 1

    in_h, in_w = result.input_shape
    out_h, out_w = result.output_shape
    logger.info("Successfully applied %s!", spec.display_name)
    logger.info(
        "  %s (%dx%d) -> %s (%dx%d)",
        result.input_path,
        in_w,
        in_h,
        result.output_path,
        out_w,
        out_h,
    )
    return 0
