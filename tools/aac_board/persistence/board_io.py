"""Board file I/O with atomic writes.

This module handles reading and writing board files:
- Each call performs one scoped pass over the file
- Failures are returned as Err values instead of being raised
- Uses atomic write pattern (write temp file, then rename)
"""

from __future__ import annotations

from contextlib import suppress
from pathlib import Path
from typing import TYPE_CHECKING

from aac_board.config import BOARD_ENCODING, LINE_TERMINATOR
from aac_board.errors import BoardFormatError, BoardIOError, Err, Ok, Result
from aac_board.persistence.board_format import Section, iter_board_lines, parse_board_lines

if TYPE_CHECKING:
    from aac_board.board import Board


def read_board(path: Path) -> Result[list[Section]]:
    """Read and parse a board file.

    Args:
        path: Path to the board text file

    Returns:
        Ok(sections) on success
        Err(BoardIOError) if the file cannot be read or decoded, or the path is invalid
        Err(BoardFormatError) if the text is malformed
    """
    try:
        with path.open("r", encoding=BOARD_ENCODING, newline="") as handle:
            return Ok(parse_board_lines(handle, source=str(path)))
    except BoardFormatError as exc:
        return Err(exc)
    except (OSError, UnicodeDecodeError, ValueError) as exc:
        return Err(BoardIOError(str(path), str(exc)))


def write_board(path: Path, board: "Board") -> Result[Path]:
    """Write a board file atomically.

    Uses a write-then-rename pattern to ensure file integrity:
    1. Write to a temporary file (path.tmp)
    2. Rename temp file to target path

    Args:
        path: Target file path
        board: Board to serialize

    Returns:
        Ok(path) on success, Err(BoardIOError) otherwise

    Invariants:
        - Parent directories are created if they don't exist
        - Original file is not corrupted if write fails partway
    """
    temp_path: Path | None = None
    try:
        temp_path = path.with_suffix(f"{path.suffix}.tmp")
        path.parent.mkdir(parents=True, exist_ok=True)
        with temp_path.open("w", encoding=BOARD_ENCODING, newline="") as handle:
            for line in iter_board_lines(board):
                handle.write(line)
                handle.write(LINE_TERMINATOR)
        temp_path.replace(path)
    except (OSError, ValueError) as exc:
        if temp_path is not None:
            with suppress(OSError, ValueError):
                temp_path.unlink(missing_ok=True)
        return Err(BoardIOError(str(path), str(exc)))
    return Ok(path)
