"""Helpers shared by command handlers."""

from __future__ import annotations

import logging
from pathlib import Path

from aac_board.board import Board
from aac_board.errors import unwrap

logger = logging.getLogger(__name__)


def load_board_for_command(board_path: Path) -> Board:
    """Load the board a command operates on.

    A missing file gives an empty board so the first `add` can create it.
    Any other read or format problem is raised, so a damaged file is never
    silently replaced by an empty board.

    Raises:
        BoardIOError: If the file exists but cannot be read
        BoardFormatError: If the file is malformed
    """
    if not board_path.exists():
        logger.info("Board file %s does not exist; starting empty", board_path)
        return Board()
    return unwrap(Board.load(board_path))
