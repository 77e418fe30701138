"""Navigation commands for AAC boards.

This module provides the read-only board commands:
- show: Display the image keys of the home page or a category
- categories: Display every category with its item count
- select: Replay a sequence of selections starting from home
"""

from __future__ import annotations

import argparse
from pathlib import Path

from aac_board.commands.common import load_board_for_command


def cmd_show(board_path: Path, args: argparse.Namespace) -> int:
    """List the image keys of a page.

    Args:
        board_path: Board file to read
        args: CLI arguments with optional category

    Returns:
        0 on success

    Raises:
        NotFoundError: If the category doesn't exist
    """
    board = load_board_for_command(board_path)
    if args.category:
        board.open_category(args.category)

    image_locs = board.get_image_locs()
    if not image_locs:
        print("No images found.")
        return 0

    at_home = board.is_home()
    for image_key in image_locs:
        if at_home:
            print(f"{image_key:40} | category={board.homepage.select(image_key)}")
        else:
            print(f"{image_key:40} | {board.select(image_key)}")

    return 0


def cmd_categories(board_path: Path, _args: argparse.Namespace) -> int:
    """List all categories with their item counts.

    Args:
        board_path: Board file to read
        _args: CLI arguments (unused)

    Returns:
        0 on success
    """
    board = load_board_for_command(board_path)
    names = board.category_names()
    if not names:
        print("No categories found.")
        return 0

    for name in names:
        count = len(board.get_category_page(name))
        print(f"{name:30} | items={count:>4}")
    return 0


def cmd_select(board_path: Path, args: argparse.Namespace) -> int:
    """Select images in order, printing what each selection does.

    Opening a category prints "-> <category>"; selecting an item prints
    the text to speak.

    Args:
        board_path: Board file to read
        args: CLI arguments with image_keys and optional category

    Returns:
        0 on success

    Raises:
        NotFoundError: If an image is not on the page being shown
    """
    board = load_board_for_command(board_path)
    if args.category:
        board.open_category(args.category)

    for image_key in args.image_keys:
        spoken = board.select(image_key)
        if spoken:
            print(spoken)
        else:
            print(f"-> {board.get_category()}")
    return 0
