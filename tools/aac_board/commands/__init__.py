"""CLI commands for AAC board management.

This module exports all command handlers:
- show / categories / select: Board navigation
- add: Board editing
- validate: Board consistency checks
"""

from aac_board.commands.board import cmd_categories, cmd_select, cmd_show
from aac_board.commands.items import cmd_add
from aac_board.commands.validate import cmd_validate

__all__ = [
    # Navigation
    "cmd_show",
    "cmd_categories",
    "cmd_select",
    # Editing
    "cmd_add",
    # Validate
    "cmd_validate",
]
