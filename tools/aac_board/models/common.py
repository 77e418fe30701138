"""Common types shared across board models.

This module defines the branded string types used for image keys and
category names, plus the checks that decide whether a value can be stored
in the line-oriented board format.
"""

from __future__ import annotations

from typing import NewType

from aac_board.config import FIELD_SEPARATOR, ITEM_PREFIX

# -----------------------------------------------------------------------------
# Key Types
# -----------------------------------------------------------------------------

ImageKey = NewType("ImageKey", str)
"""Identifier of a selectable tile, usually the image's file location."""

CategoryName = NewType("CategoryName", str)
"""Display name of a category; the empty string names the home page."""


def is_representable_key(value: str, *, home: bool = False) -> bool:
    """Check if a key survives a write/load cycle.

    Args:
        value: The image key to check
        home: True for keys stored on the home page, where a leading
            item marker would turn the line into an item line

    Returns:
        True if the key contains no separator or newline
    """
    if not isinstance(value, str):
        return False
    if FIELD_SEPARATOR in value or "\n" in value or "\r" in value:
        return False
    if home and value.startswith(ITEM_PREFIX):
        return False
    return True


def is_representable_text(value: str) -> bool:
    """Check if a category name or spoken text fits on a single line."""
    return isinstance(value, str) and "\n" not in value and "\r" not in value
