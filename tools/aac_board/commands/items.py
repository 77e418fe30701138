"""Item commands for board editing.

This module provides the command that adds tiles to a board:
- add at home: creates a category and the home tile that opens it
- add --category: adds a spoken item to an existing category
"""

from __future__ import annotations

import argparse
from pathlib import Path

from aac_board.commands.common import load_board_for_command
from aac_board.errors import ValidationError, unwrap
from aac_board.models.common import is_representable_key, is_representable_text


def cmd_add(board_path: Path, args: argparse.Namespace) -> int:
    """Add a tile and save the board.

    Args:
        board_path: Board file to update
        args: CLI arguments with image_key, text and optional category

    Returns:
        0 on success

    Raises:
        NotFoundError: If the category doesn't exist
        ValidationError: If the key or text cannot be stored in a board file
        BoardIOError: If the board cannot be written
    """
    at_home = not args.category
    issues: list[str] = []
    if not is_representable_key(args.image_key, home=at_home):
        issues.append(f"image key '{args.image_key}' cannot be stored in a board file")
    if not is_representable_text(args.text):
        issues.append("text must not contain newlines")
    if issues:
        raise ValidationError(issues)

    board = load_board_for_command(board_path)
    if not at_home:
        board.open_category(args.category)

    board.add_item(args.image_key, args.text)
    unwrap(board.write_to_file(board_path))

    if at_home:
        print(f"Added category '{args.text}' opened by {args.image_key}")
    else:
        print(f"Added '{args.text}' to category '{args.category}'")
    return 0
