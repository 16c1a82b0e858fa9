"""Parses the plain-text board format: N, then N×N tile values."""

from __future__ import annotations

from pathlib import Path

from npuzzle.models.board import Board


def read_board(text: str) -> Board:
    """Build a board from whitespace-separated integers.

    Example::

        3
        0 1 3
        4 2 5
        7 8 6

    Size and tile checks are left to ``Board.from_flat``.
    """
    tokens = text.split()
    if not tokens:
        raise ValueError("Empty input: expected the board size first.")
    try:
        values = [int(t) for t in tokens]
    except ValueError as exc:
        raise ValueError(f"Board input must contain only integers ({exc}).") from exc

    return Board.from_flat(values[0], values[1:])


def load_board(path: Path) -> Board:
    """Read a board from *path*."""
    return read_board(path.read_text())
