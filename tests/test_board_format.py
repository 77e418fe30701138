import pytest

from aac_board.board import Board
from aac_board.errors import BoardFormatError
from aac_board.models import CategoryEntry, HomeEntry
from aac_board.persistence import format_board_lines, parse_board_text, split_line


def test_split_line_keeps_spaces_in_value():
    assert split_line("img/a.png french fries") == ("img/a.png", "french fries")
    assert split_line(">img/a.png a b  c") == (">img/a.png", "a b  c")
    assert split_line("img/a.png") == ("img/a.png", "")


def test_parse_sections():
    sections = parse_board_text(
        "img/food/plate.png food\n"
        ">img/food/fries.png french fries\n"
        ">img/food/melon.png watermelon\n"
        "img/clothing/hanger.png clothing\n"
    )

    assert sections == [
        (
            HomeEntry("img/food/plate.png", "food"),
            [
                CategoryEntry("img/food/fries.png", "french fries"),
                CategoryEntry("img/food/melon.png", "watermelon"),
            ],
        ),
        (HomeEntry("img/clothing/hanger.png", "clothing"), []),
    ]


def test_parse_handles_crlf_and_blank_lines():
    sections = parse_board_text("a.png food\r\n\r\n>b.png fries\r\n")

    assert sections == [(HomeEntry("a.png", "food"), [CategoryEntry("b.png", "fries")])]


def test_item_before_category_is_a_format_error():
    with pytest.raises(BoardFormatError) as excinfo:
        parse_board_text(">img/food/fries.png french fries\n", source="board.txt")

    assert excinfo.value.line_number == 1
    assert str(excinfo.value).startswith("board.txt:1:")


def test_format_board_lines():
    board = Board.from_sections(
        parse_board_text(
            "img/food/plate.png food\n"
            ">img/food/fries.png french fries\n"
            "img/clothing/hanger.png clothing\n"
            ">img/clothing/shirt.png collared shirt\n"
        )
    )

    assert format_board_lines(board) == [
        "img/food/plate.png food",
        ">img/food/fries.png french fries",
        "img/clothing/hanger.png clothing",
        ">img/clothing/shirt.png collared shirt",
    ]


def test_format_skips_items_of_missing_category():
    board = Board()
    board.add_item("img/food/plate.png", "food")
    board.homepage.add_item("img/ghost.png", "ghost")  # bypasses registration

    assert format_board_lines(board) == [
        "img/food/plate.png food",
        "img/ghost.png ghost",
    ]


def test_duplicate_declarations_share_one_category():
    board = Board.from_sections(
        parse_board_text(
            "a.png food\n"
            ">fries.png fries\n"
            "b.png food\n"
            ">melon.png melon\n"
        )
    )

    assert board.get_image_locs() == ["a.png", "b.png"]
    assert board.get_category_page("food").get_image_locs() == ["fries.png", "melon.png"]


def test_parse_text_only_splits_on_newlines():
    text = "a.png page\x0cbreak\n>b.png one two\n"

    assert parse_board_text(text) == [
        (HomeEntry("a.png", "page\x0cbreak"), [CategoryEntry("b.png", "one two")]),
    ]


def test_empty_keys_round_trip():
    board = Board()
    board.add_item("", "food")
    board.open_category("food")
    board.add_item("", "text")

    lines = format_board_lines(board)
    assert lines == [" food", "> text"]

    copy = Board.from_sections(parse_board_text("\n".join(lines) + "\n"))
    assert copy.home_entries() == board.home_entries()
    assert copy.get_category_page("food").entries() == board.get_category_page("food").entries()
