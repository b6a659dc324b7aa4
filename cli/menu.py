"""Interactive menu loop.

Prompts for an input file, shows the numbered filter menu, collects any
parameters the chosen filter needs (re-prompting until they are valid),
asks for an output file and applies the filter. Repeats until Q/q or
end of input.
"""

from __future__ import annotations

import argparse
import logging
from typing import Callable

from filters import FILTERS, FilterSpec, ParamSpec, apply_filter

logger = logging.getLogger(__name__)

CHANGE_IMAGE = len(FILTERS) + 1
QUIT_KEYS = {"q", "Q"}

InputFunc = Callable[[str], str]


def add_menu_subparser(subparsers: argparse._SubParsersAction) -> None:
    menu_parser = subparsers.add_parser(
        "menu",
        help="Interactive image processing menu",
    )
    menu_parser.add_argument(
        "input",
        nargs="?",
        help="Input BMP file (prompted for if omitted)",
    )
    menu_parser.set_defaults(_cmd=cmd_menu)


def print_menu(current_file: str) -> None:
    logger.info("")
    logger.info("IMAGE PROCESSING MENU")
    for index, spec in enumerate(FILTERS, start=1):
        logger.info("%2d) %s", index, spec.display_name.capitalize())
    logger.info("%2d) Change image (current: %s)", CHANGE_IMAGE, current_file)
    logger.info("")


def prompt_param(param: ParamSpec, input_func: InputFunc) -> float | int:
    """Ask for a parameter until the user enters a valid value."""
    while True:
        try:
            return param.parse(input_func(param.prompt))
        except ValueError as exc:
            logger.info("Invalid input! %s", exc)


def run_filter(
    spec: FilterSpec,
    current_file: str,
    input_func: InputFunc,
) -> bool:
    """Collect parameters and an output name, then apply one filter."""
    logger.info("")
    logger.info("%s selected", spec.display_name.capitalize())
    params = {param.name: prompt_param(param, input_func) for param in spec.params}
    step = spec.build(**params)

    output_file = input_func("Enter output BMP filename: ").strip()
    result = apply_filter(current_file, output_file, step)
    if not result.ok:
        logger.error("%s", result.error)
        return False

    logger.info("Successfully applied %s!", spec.display_name)
    return True


def parse_selection(text: str) -> int:
    """Return the menu number for a selection, or 0 if it is not a number."""
    text = text.strip()
    return int(text) if text.isdecimal() else 0


def run_menu(current_file: str | None = None, input_func: InputFunc = input) -> int:
    """Run the menu loop until the user quits or input ends."""
    logger.info("bmpf image processing")
    try:
        if not current_file:
            current_file = input_func("Enter input BMP filename: ").strip()

        while True:
            print_menu(current_file)
            choice = input_func("Enter menu selection (Q/q to quit): ").strip()
            if choice in QUIT_KEYS:
                return 0

            selection = parse_selection(choice)
            if selection == CHANGE_IMAGE:
                logger.info("Change image selected")
                current_file = input_func("Enter input BMP filename: ").strip()
            elif 1 <= selection <= len(FILTERS):
                run_filter(FILTERS[selection - 1], current_file, input_func)
    except EOFError:
        logger.info("")
        return 0


def cmd_menu(args: argparse.Namespace) -> int:
    return run_menu(args.input)
