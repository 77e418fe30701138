from aac_board.cli import main


def test_show_home(sample_board_file, capsys):
    assert main(["--board", str(sample_board_file), "show"]) == 0

    out = capsys.readouterr().out
    assert "img/food/plate.png" in out
    assert "category=clothing" in out


def test_show_category(sample_board_file, capsys):
    assert main(["--board", str(sample_board_file), "show", "--category", "food"]) == 0

    out = capsys.readouterr().out
    assert "french fries" in out
    assert "img/clothing/hanger.png" not in out


def test_show_unknown_category_fails(sample_board_file, capsys):
    assert main(["--board", str(sample_board_file), "show", "--category", "toys"]) == 1
    assert "Category 'toys' not found" in capsys.readouterr().err


def test_categories(sample_board_file, capsys):
    assert main(["--board", str(sample_board_file), "categories"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("food")
    assert lines[0].endswith("items=   1")
    assert lines[1].startswith("clothing")


def test_select_sequence(sample_board_file, capsys):
    argv = ["--board", str(sample_board_file), "select", "img/food/plate.png", "img/food/fries.png"]
    assert main(argv) == 0

    assert capsys.readouterr().out.splitlines() == ["-> food", "french fries"]


def test_select_unknown_image_fails(sample_board_file, capsys):
    argv = ["--board", str(sample_board_file), "select", "img/food/plate.png", "img/clothing/hanger.png"]
    assert main(argv) == 1

    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["-> food"]
    assert "img/clothing/hanger.png" in captured.err


def test_add_creates_board_file(tmp_path, capsys):
    path = tmp_path / "new.txt"

    assert main(["--board", str(path), "add", "img/toys/ball.png", "toys"]) == 0
    assert main(["--board", str(path), "add", "img/toys/car.png", "toy car", "--category", "toys"]) == 0

    assert path.read_text(encoding="utf-8") == "img/toys/ball.png toys\n>img/toys/car.png toy car\n"
    assert "Added 'toy car' to category 'toys'" in capsys.readouterr().out


def test_add_rejects_unstorable_key(tmp_path, capsys):
    path = tmp_path / "new.txt"

    assert main(["--board", str(path), "add", "img/my ball.png", "toys"]) == 1
    assert not path.exists()
    assert "cannot be stored" in capsys.readouterr().err


def test_malformed_file_is_reported_not_overwritten(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text(">img/orphan.png orphan\n", encoding="utf-8")

    assert main(["--board", str(path), "add", "img/toys/ball.png", "toys"]) == 1
    assert path.read_text(encoding="utf-8") == ">img/orphan.png orphan\n"
    assert "item line appears before any category" in capsys.readouterr().err


def test_validate(sample_board_file, capsys):
    assert main(["--board", str(sample_board_file), "validate"]) == 0
    assert "OK: 2 categories, 1 items" in capsys.readouterr().out
