#!/usr/bin/env python3
"""Entry point for running as `python -m aac_board`."""

from aac_board.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
