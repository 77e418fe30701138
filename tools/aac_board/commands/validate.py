"""Validate command for board consistency checks.

This module provides the validate command that checks the home page
against the category registry and the text format.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from aac_board.commands.common import load_board_for_command
from aac_board.validation import validate_board


def cmd_validate(board_path: Path, _args: argparse.Namespace) -> int:
    """Validate the board file.

    Args:
        board_path: Board file to check
        _args: CLI arguments (unused)

    Returns:
        0 if validation passed, 1 if errors were found

    Output:
        On success: "OK: N categories, M items"
        On failure: List of validation issues
    """
    board = load_board_for_command(board_path)
    result = validate_board(board)

    for issue in result.warnings:
        print(f"Warning: {issue}")

    if not result:
        print("Validation failed:")
        for issue in result.errors:
            print(f" - {issue}")
        return 1

    item_count = sum(len(category) for category in board.categories.values())
    print(f"OK: {len(board.categories)} categories, {item_count} items")
    return 0
