#!/usr/bin/env python3
"""CLI entry point for AAC board management.

This module provides the argument parser and main entry point that
wires together all commands from the commands package.

Usage:
    python -m aac_board show
    python -m aac_board show --category food
    python -m aac_board select img/food/plate.png img/food/fries.png
    python -m aac_board add img/toys/ball.png toys
    python -m aac_board add img/toys/car.png "toy car" --category toys
    python -m aac_board validate
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from aac_board.commands import (
    cmd_add,
    cmd_categories,
    cmd_select,
    cmd_show,
    cmd_validate,
)
from aac_board.config import BOARD_PATH_ENV, DEFAULT_BOARD_PATH, LOG_FORMAT
from aac_board.errors import BoardError

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    """Send log records to stderr; DEBUG with --verbose, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the complete argument parser with all subcommands.

    Returns:
        Configured ArgumentParser with subcommands for:
        - show, categories, select
        - add
        - validate
    """
    parser = argparse.ArgumentParser(
        description="Navigate and edit AAC communication boards.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  aac-board show
  aac-board show --category food
  aac-board categories
  aac-board select img/food/plate.png img/food/fries.png
  aac-board add img/toys/ball.png toys
  aac-board add img/toys/car.png "toy car" --category toys
  aac-board validate

The default board file can be set with the {BOARD_PATH_ENV} environment variable.
""",
    )
    parser.add_argument(
        "--board",
        type=Path,
        default=DEFAULT_BOARD_PATH,
        help=f"Board file to use (default: {DEFAULT_BOARD_PATH}).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug details to stderr.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # ---------------------------------------------------------------------
    # navigation commands
    # ---------------------------------------------------------------------
    show_parser = subparsers.add_parser("show", help="List the images of a page.")
    show_parser.add_argument(
        "--category",
        help="Category to list (default: the home page).",
    )
    show_parser.set_defaults(handler=cmd_show)

    categories_parser = subparsers.add_parser(
        "categories",
        help="List all categories with item counts.",
    )
    categories_parser.set_defaults(handler=cmd_categories)

    select_parser = subparsers.add_parser(
        "select",
        help="Select images in order, starting from the home page.",
    )
    select_parser.add_argument(
        "image_keys",
        nargs="+",
        help="Image keys to select, one after the other.",
    )
    select_parser.add_argument(
        "--category",
        help="Category to start in instead of the home page.",
    )
    select_parser.set_defaults(handler=cmd_select)

    # ---------------------------------------------------------------------
    # editing commands
    # ---------------------------------------------------------------------
    add_parser = subparsers.add_parser(
        "add",
        help="Add a category (at home) or an item (with --category), then save.",
    )
    add_parser.add_argument("image_key", help="Image location of the new tile.")
    add_parser.add_argument(
        "text",
        help="Category name at home, or the text to speak inside a category.",
    )
    add_parser.add_argument(
        "--category",
        help="Category that receives the item (default: the home page).",
    )
    add_parser.set_defaults(handler=cmd_add)

    # ---------------------------------------------------------------------
    # validate command
    # ---------------------------------------------------------------------
    validate_parser = subparsers.add_parser(
        "validate",
        help="Check home tiles against categories and the file format.",
    )
    validate_parser.set_defaults(handler=cmd_validate)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for error)

    Handles:
        - BoardError: User-facing error messages (unknown image, bad file, ...)
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    handler = getattr(args, "handler", None)
    if handler is None:
        parser.print_help()
        return 1

    try:
        return int(handler(args.board, args))
    except BoardError as error:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {error}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
