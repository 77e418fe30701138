"""Tagged records for the two kinds of board tiles.

A home tile points at a category; a category tile carries text to be spoken.
Keeping them as distinct types lets the parser and writer handle each line
kind explicitly instead of inferring meaning from navigation state.
"""

from __future__ import annotations

from dataclasses import dataclass

from aac_board.config import FIELD_SEPARATOR, ITEM_PREFIX
from aac_board.models.common import CategoryName, ImageKey


@dataclass(frozen=True, slots=True)
class HomeEntry:
    """Home page tile that opens a category.

    Invariants:
        - category_name names a registered Category on a consistent board
    """
    image_key: ImageKey
    category_name: CategoryName

    def to_line(self) -> str:
        """Render as a category declaration line (without terminator)."""
        return f"{self.image_key}{FIELD_SEPARATOR}{self.category_name}"


@dataclass(frozen=True, slots=True)
class CategoryEntry:
    """Leaf tile inside a category."""
    image_key: ImageKey
    text: str

    def to_line(self) -> str:
        """Render as an item line (without terminator)."""
        return f"{ITEM_PREFIX}{self.image_key}{FIELD_SEPARATOR}{self.text}"
