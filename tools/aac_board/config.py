"""Configuration constants for the board text format and the CLI.

This module centralizes the format tokens and defaults used across the package.
Changing the file grammar requires updating only this file and the parser.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Final

# -----------------------------------------------------------------------------
# Text Format
# -----------------------------------------------------------------------------

ITEM_PREFIX: Final[str] = ">"
"""Lines starting with this marker are items of the most recent category."""

FIELD_SEPARATOR: Final[str] = " "
"""Separates the image key from the rest of the line."""

LINE_TERMINATOR: Final[str] = "\n"

BOARD_ENCODING: Final[str] = "utf-8"


# -----------------------------------------------------------------------------
# Navigation
# -----------------------------------------------------------------------------

HOME_CATEGORY: Final[str] = ""
"""Name of the home page; also the value of Board.get_category() at home."""


# -----------------------------------------------------------------------------
# CLI Defaults
# -----------------------------------------------------------------------------

BOARD_PATH_ENV: Final[str] = "AAC_BOARD_PATH"

DEFAULT_BOARD_PATH: Final[Path] = Path(os.environ.get(BOARD_PATH_ENV, "AACMappings.txt"))
"""Board file used when --board is not given."""

LOG_FORMAT: Final[str] = "%(levelname)s:%(name)s:%(message)s"
