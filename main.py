#!/usr/bin/env python3
"""
Keypad Chain Runner

Main entry point: reads door codes and prints the complexity sums for the
short (2 robots) and long (25 robots) keypad chains.

Usage:
    uv run python main.py                        # Read codes from ./input
    uv run python main.py --input codes.txt      # Different code file
    uv run python main.py --show-sequences       # Also print part 1 press sequences
    uv run python main.py --help                 # Show all options

Settings can also come from a .env file (see .env.example).
"""

import sys

from keypad_chain.cli import main

if __name__ == "__main__":
    sys.exit(main())
