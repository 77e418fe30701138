"""Persistence layer for AAC boards.

This module exports the text format and file I/O components:
- Line-oriented parsing and formatting
- Scoped reads and atomic writes returning Result values
"""

from aac_board.persistence.board_format import (
    Section,
    format_board_lines,
    iter_board_lines,
    parse_board_lines,
    parse_board_text,
    split_line,
)
from aac_board.persistence.board_io import read_board, write_board

__all__ = [
    # Text format
    "Section",
    "format_board_lines",
    "iter_board_lines",
    "parse_board_lines",
    "parse_board_text",
    "split_line",
    # File I/O
    "read_board",
    "write_board",
]
