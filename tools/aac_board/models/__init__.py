"""Domain models for AAC boards.

This module exports the page and tile types used across the package:
- Category and the Page protocol
- Tagged tile records (HomeEntry, CategoryEntry)
- Common types (ImageKey, CategoryName)
"""

from aac_board.models.category import Category, Page
from aac_board.models.common import (
    CategoryName,
    ImageKey,
    is_representable_key,
    is_representable_text,
)
from aac_board.models.entries import CategoryEntry, HomeEntry

__all__ = [
    # Common
    "CategoryName",
    "ImageKey",
    "is_representable_key",
    "is_representable_text",
    # Entries
    "CategoryEntry",
    "HomeEntry",
    # Pages
    "Category",
    "Page",
]
