"""Consistency checks for a loaded board.

This module verifies the relationship between home tiles and the category
registry, and flags values that the text format cannot store:
- Home tiles pointing at unknown categories (error)
- Categories no home tile opens (warning)
- Keys or texts that would not survive a write/load cycle (error)
"""

from __future__ import annotations

from aac_board.board import Board
from aac_board.errors import ValidationResult
from aac_board.models.common import is_representable_key, is_representable_text


def validate_board(board: Board) -> ValidationResult:
    """Validate a board.

    Args:
        board: The board to check

    Returns:
        ValidationResult with all issues found
    """
    result = ValidationResult()
    result.merge(_validate_home(board))
    result.merge(_validate_reachability(board))
    for name, category in board.categories.items():
        for entry in category.entries():
            path = f"{name}[{entry.image_key}]"
            if not is_representable_key(entry.image_key):
                result.add(path, "image key must contain no spaces or newlines")
            if not is_representable_text(entry.text):
                result.add(path, "text must not contain newlines")
    return result


def _validate_home(board: Board) -> ValidationResult:
    result = ValidationResult()
    for entry in board.home_entries():
        path = f"home[{entry.image_key}]"
        if entry.category_name not in board.categories:
            result.add(path, f"category '{entry.category_name}' is not registered")
        if not is_representable_key(entry.image_key, home=True):
            result.add(
                path,
                "home image key must contain no spaces or newlines "
                "and not start with '>'",
            )
        if not is_representable_text(entry.category_name):
            result.add(path, "category name must not contain newlines")
    return result


def _validate_reachability(board: Board) -> ValidationResult:
    result = ValidationResult()
    reachable = {entry.category_name for entry in board.home_entries()}
    for name in board.category_names():
        if name not in reachable:
            result.add(
                f"categories[{name}]",
                "no home tile opens this category; it will not be saved",
                severity="warning",
            )
    return result
