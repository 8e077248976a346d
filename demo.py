#!/usr/bin/env python3
"""Replay a scripted sequence of clicks and print the board after each one."""
import sys

from src.minefield.cli import main


if __name__ == "__main__":
    sys.exit(main())
