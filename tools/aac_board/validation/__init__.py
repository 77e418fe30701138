"""Validation layer for AAC boards.

This module exports consistency checks between the home page,
the category registry, and the text format.
"""

from aac_board.validation.consistency import validate_board

__all__ = [
    "validate_board",
]
