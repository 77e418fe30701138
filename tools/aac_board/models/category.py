"""Domain model for a single category of board tiles.

A Category maps image keys to the text spoken when the tile is selected.
The home page is also a Category (named ""), whose values are category names.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from aac_board.errors import NotFoundError
from aac_board.models.common import ImageKey
from aac_board.models.entries import CategoryEntry


@runtime_checkable
class Page(Protocol):
    """Capability shared by Category and Board: something a UI can display."""

    def get_image_locs(self) -> list[str]: ...

    def select(self, image_key: str) -> str: ...

    def get_category(self) -> str: ...

    def has_image(self, image_key: str) -> bool: ...

    def add_item(self, image_key: str, text: str) -> None: ...


class Category:
    """Named group of image key -> text mappings.

    Invariants:
        - name never changes after construction
        - a key appears at most once; the last add_item for a key wins
        - keys keep their insertion order
    """

    __slots__ = ("_name", "_items")

    def __init__(self, name: str) -> None:
        self._name = name
        self._items: dict[str, str] = {}

    @property
    def name(self) -> str:
        return self._name

    def add_item(self, image_key: str, text: str) -> None:
        """Add or overwrite the text spoken for an image.

        Raises:
            TypeError: If image_key is None (a programming error)
        """
        if image_key is None:
            raise TypeError("image_key must not be None")
        self._items[image_key] = text

    def get_image_locs(self) -> list[str]:
        """Return all image keys in insertion order ([] when empty)."""
        return list(self._items)

    def get_category(self) -> str:
        return self._name

    def select(self, image_key: str) -> str:
        """Return the text associated with an image.

        Raises:
            NotFoundError: If the image is not in this category
        """
        try:
            return self._items[image_key]
        except KeyError:
            raise NotFoundError("Image", image_key) from None

    def has_image(self, image_key: str) -> bool:
        return image_key in self._items

    def entries(self) -> list[CategoryEntry]:
        """Return the items as tagged records, in insertion order."""
        return [CategoryEntry(ImageKey(key), text) for key, text in self._items.items()]

    def __contains__(self, image_key: object) -> bool:
        return image_key in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Category(name={self._name!r}, items={len(self._items)})"
