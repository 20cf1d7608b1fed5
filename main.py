#!/usr/bin/env python3
"""
Minesweeper - console entry point.

Usage:
    python main.py [--width W] [--height H] [--mines N] [--seed S]
    python main.py --preset expert
"""
import sys

from src.minesweeper.cli import main


if __name__ == "__main__":
    sys.exit(main())
