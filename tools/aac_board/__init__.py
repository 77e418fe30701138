"""AAC Board - Tool for managing two-level AAC communication boards.

This package loads, navigates, edits, and saves boards of picture tiles
organized into categories, with clear architectural boundaries:

- **board**: The Board aggregate and its home/category navigation state machine
- **models/**: Category pages and the tagged home/category tile records
- **persistence/**: Line-oriented text format and atomic file I/O
- **validation/**: Consistency checks between home tiles and categories
- **commands/**: CLI command handlers orchestrating operations
- **errors**: Typed error hierarchy with explicit failure states
"""

__version__ = "1.0.0"
