# Ensure `tools/` is on sys.path so tests can import `aac_board` without requiring editable install
import os
import sys

import pytest

HERE = os.path.dirname(__file__)
TOOLS = os.path.abspath(os.path.join(HERE, "..", "tools"))
if os.path.isdir(TOOLS) and TOOLS not in sys.path:
    sys.path.insert(0, TOOLS)


SAMPLE_BOARD = (
    "img/food/plate.png food\n"
    ">img/food/fries.png french fries\n"
    "img/clothing/hanger.png clothing\n"
)


@pytest.fixture
def sample_board_file(tmp_path):
    """Write the food/clothing sample board and return its path."""
    path = tmp_path / "AACMappings.txt"
    path.write_text(SAMPLE_BOARD, encoding="utf-8")
    return path
