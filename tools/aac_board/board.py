"""Domain model for a two-level AAC board.

The Board owns the home page, the registry of categories, and the name of
the category currently shown. Selecting a home tile opens its category;
selecting a tile inside a category returns the text to speak.

States:
    Home              current_category == ""
    InCategory(name)  current_category == name, name in categories
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from aac_board.config import HOME_CATEGORY
from aac_board.errors import NotFoundError, Ok, Result, is_ok
from aac_board.models.category import Category, Page
from aac_board.models.common import CategoryName, ImageKey
from aac_board.models.entries import HomeEntry
from aac_board.persistence.board_format import Section
from aac_board.persistence.board_io import read_board, write_board

logger = logging.getLogger(__name__)


class Board:
    """Home page plus named categories, with navigation state.

    Invariants:
        - homepage.name == ""
        - every home value names a key of categories
        - current_category is "" or a key of categories
        - categories and home entries are never removed
    """

    def __init__(self) -> None:
        self.homepage = Category(HOME_CATEGORY)
        self.categories: dict[str, Category] = {}
        self.current_category: str = HOME_CATEGORY

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_sections(cls, sections: Iterable[Section]) -> "Board":
        """Build a board from parsed (home entry, items) sections.

        A category declared twice keeps a single Category; items of both
        declarations accumulate in it.
        """
        board = cls()
        for home_entry, items in sections:
            category = board._register_category(home_entry.category_name)
            board.homepage.add_item(home_entry.image_key, home_entry.category_name)
            for entry in items:
                category.add_item(entry.image_key, entry.text)
        return board

    @classmethod
    def load(cls, path: Path | str) -> Result["Board"]:
        """Load a board file, returning the failure instead of hiding it.

        Returns:
            Ok(Board) on success, Err(BoardIOError | BoardFormatError) otherwise
        """
        result = read_board(Path(path))
        if not is_ok(result):
            return result
        board = cls.from_sections(result.value)
        logger.debug(
            "Loaded %d categories from %s", len(board.categories), path
        )
        return Ok(board)

    @classmethod
    def from_file(cls, path: Path | str) -> "Board":
        """Load a board file on a best-effort basis.

        An unreadable or malformed file yields an empty board (home page with
        no categories). The failure is logged rather than raised so an
        interactive session can always start.
        """
        result = cls.load(path)
        if not is_ok(result):
            logger.warning("Starting with an empty board: %s", result.error)
            return cls()
        return result.value

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def _active_page(self) -> Page:
        if self.current_category == HOME_CATEGORY:
            return self.homepage
        category = self.categories.get(self.current_category)
        if category is None:
            logger.warning(
                "Current category %r is not registered; showing home page",
                self.current_category,
            )
            return self.homepage
        return category

    def is_home(self) -> bool:
        return self.current_category == HOME_CATEGORY

    def select(self, image_key: str) -> str:
        """Act on a selected image.

        At home the image opens its category and "" is returned. Inside a
        category the text to speak is returned and the state is unchanged.

        Raises:
            NotFoundError: If the image is not on the page being shown
        """
        page = self._active_page()
        if not page.has_image(image_key):
            raise NotFoundError("Image", image_key)

        value = page.select(image_key)
        if page is not self.homepage:
            return value

        self.current_category = value
        logger.debug("Opened category %r via %s", value, image_key)
        return ""

    def get_image_locs(self) -> list[str]:
        """Return the image keys of the page being shown ([] when empty)."""
        return self._active_page().get_image_locs()

    def has_image(self, image_key: str) -> bool:
        return self._active_page().has_image(image_key)

    def get_category(self) -> str:
        """Return the current category name, or "" at home."""
        return self.current_category

    def reset(self) -> None:
        """Return to the home page."""
        self.current_category = HOME_CATEGORY

    def open_category(self, name: str) -> None:
        """Show a category directly, without selecting its home tile.

        Raises:
            NotFoundError: If no category has that name
        """
        if name == HOME_CATEGORY:
            self.reset()
            return
        if name not in self.categories:
            raise NotFoundError("Category", name)
        self.current_category = name

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def _register_category(self, name: str) -> Category:
        category = self.categories.get(name)
        if category is None:
            category = Category(name)
            self.categories[name] = category
        return category

    def add_item(self, image_key: str, text: str) -> None:
        """Add a tile to the page being shown.

        At home the text is a category name: the tile is added to the home
        page and the category is registered. An existing category of that
        name is reused, so its items are kept. Inside a category only the
        leaf tile is added.
        """
        page = self._active_page()
        page.add_item(image_key, text)
        if page is self.homepage:
            if text in self.categories:
                logger.info("Home tile %s reuses existing category %r", image_key, text)
            self._register_category(text)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def home_entries(self) -> list[HomeEntry]:
        """Return the home tiles as tagged records, in insertion order."""
        return [
            HomeEntry(ImageKey(entry.image_key), CategoryName(entry.text))
            for entry in self.homepage.entries()
        ]

    def category_names(self) -> list[str]:
        return list(self.categories)

    def get_category_page(self, name: str) -> Category:
        """Look up a registered category.

        Raises:
            NotFoundError: If no category has that name
        """
        try:
            return self.categories[name]
        except KeyError:
            raise NotFoundError("Category", name) from None

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    def write_to_file(self, path: Path | str) -> Result[Path]:
        """Write the board in the same format it is loaded from.

        Never raises for I/O problems; the failure is logged and returned.

        Returns:
            Ok(path) on success, Err(BoardIOError) otherwise
        """
        result = write_board(Path(path), self)
        if not is_ok(result):
            logger.error("Board was not saved: %s", result.error)
        return result

    def __repr__(self) -> str:
        return (
            f"Board(categories={len(self.categories)}, "
            f"current_category={self.current_category!r})"
        )
