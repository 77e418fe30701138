"""Line-oriented board text format.

Grammar (one record per line, fields split at the first space):

    <imageKey> <categoryName>      declares a category and its home tile
    ><itemKey> <itemText>          adds an item to the last declared category

for instance:

    img/food/plate.png food
    >img/food/icons8-french-fries-96.png french fries
    >img/food/icons8-watermelon-96.png watermelon
    img/clothing/hanger.png clothing
    >img/clothing/collaredshirt.png collared shirt

There is no escaping: keys containing spaces, home keys starting with ">"
and values containing newlines cannot be represented.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Iterator

from aac_board.config import FIELD_SEPARATOR, ITEM_PREFIX, LINE_TERMINATOR
from aac_board.errors import BoardFormatError, NotFoundError
from aac_board.models.common import CategoryName, ImageKey
from aac_board.models.entries import CategoryEntry, HomeEntry

if TYPE_CHECKING:
    from aac_board.board import Board

logger = logging.getLogger(__name__)

Section = tuple[HomeEntry, list[CategoryEntry]]


def split_line(line: str) -> tuple[str, str]:
    """Split a record into its key and the rest of the line.

    Examples:
        >>> split_line(">img/food/fries.png french fries")
        ('>img/food/fries.png', 'french fries')
        >>> split_line("lonely")
        ('lonely', '')
    """
    key, _, value = line.partition(FIELD_SEPARATOR)
    return key, value


def parse_board_lines(lines: Iterable[str], *, source: str = "<string>") -> list[Section]:
    """Parse board text into (home entry, items) sections.

    Args:
        lines: Lines of the board text; trailing newlines are ignored
        source: Name used in error messages

    Returns:
        Sections in file order

    Raises:
        BoardFormatError: If an item line appears before any category line
    """
    sections: list[Section] = []
    target: list[CategoryEntry] | None = None

    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line:
            logger.debug("%s:%d: skipping blank line", source, line_number)
            continue

        key, value = split_line(line)
        if line.startswith(ITEM_PREFIX):
            if target is None:
                raise BoardFormatError(
                    source, line_number, "item line appears before any category"
                )
            target.append(CategoryEntry(ImageKey(key[len(ITEM_PREFIX):]), value))
            continue

        target = []
        sections.append((HomeEntry(ImageKey(key), CategoryName(value)), target))

    return sections


def parse_board_text(text: str, *, source: str = "<string>") -> list[Section]:
    """Parse a whole board document held in memory."""
    return parse_board_lines(text.split(LINE_TERMINATOR), source=source)


def iter_board_lines(board: "Board") -> Iterator[str]:
    """Yield the lines of a board in file order (without terminators).

    A home tile whose category is missing yields only its own line.
    """
    for home_entry in board.home_entries():
        yield home_entry.to_line()
        try:
            category = board.get_category_page(home_entry.category_name)
        except NotFoundError:
            logger.warning(
                "Home tile %s points at unknown category %r; writing it without items",
                home_entry.image_key,
                home_entry.category_name,
            )
            continue
        for entry in category.entries():
            yield entry.to_line()


def format_board_lines(board: "Board") -> list[str]:
    return list(iter_board_lines(board))
