import pytest

from aac_board.errors import NotFoundError
from aac_board.models import Category, CategoryEntry


def test_new_category_is_empty():
    category = Category("food")

    assert category.name == "food"
    assert category.get_category() == "food"
    assert category.get_image_locs() == []
    assert len(category) == 0


def test_add_item_then_select():
    category = Category("food")
    category.add_item("img/food/fries.png", "french fries")

    assert category.has_image("img/food/fries.png")
    assert "img/food/fries.png" in category
    assert category.select("img/food/fries.png") == "french fries"


def test_add_item_overwrites_existing_key():
    category = Category("food")
    category.add_item("img/food/fries.png", "french fries")
    category.add_item("img/food/fries.png", "chips")

    # Last write wins, key is not duplicated
    assert category.select("img/food/fries.png") == "chips"
    assert category.get_image_locs() == ["img/food/fries.png"]


def test_keys_keep_insertion_order():
    category = Category("clothing")
    for key in ["c.png", "a.png", "b.png"]:
        category.add_item(key, key.upper())

    assert category.get_image_locs() == ["c.png", "a.png", "b.png"]
    assert category.entries() == [
        CategoryEntry("c.png", "C.PNG"),
        CategoryEntry("a.png", "A.PNG"),
        CategoryEntry("b.png", "B.PNG"),
    ]


def test_select_missing_key_raises_not_found():
    category = Category("food")

    with pytest.raises(NotFoundError) as excinfo:
        category.select("img/nope.png")

    assert excinfo.value.key == "img/nope.png"
    assert "img/nope.png" in str(excinfo.value)
    # Callers treating the page like a mapping can catch KeyError
    assert isinstance(excinfo.value, KeyError)


def test_has_image_never_fails():
    category = Category("")

    assert category.has_image("anything") is False
    assert category.has_image("") is False


def test_none_key_is_rejected():
    with pytest.raises(TypeError):
        Category("food").add_item(None, "text")
