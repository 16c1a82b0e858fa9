#!/usr/bin/env python3
"""Sliding puzzle solver.

Usage::

    python main.py solve board.txt           # plain output
    python main.py solve board.txt -f rich   # Rich terminal output
    python main.py generate 4 --seed 1       # print a scrambled 4×4 board
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from npuzzle_cli.app import app  # noqa: E402

if __name__ == "__main__":
    app()
