"""Generates sliding puzzle boards for the solver."""

from __future__ import annotations

import random

from npuzzle.models.board import Board


class GameGenerator:
    """Creates boards by random-walking away from the solved state."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        flat = list(range(1, size * size)) + [0]
        return Board.from_flat(size, flat)

    @staticmethod
    def scramble(board: Board, steps: int, rng: random.Random | None = None) -> Board:
        """Return *board* after *steps* random legal moves.

        The walk never undoes the move it just made.
        """
        rng = rng or random.Random()
        previous: Board | None = None

        for _ in range(steps):
            neighbors = [n for n in board.neighbors() if n != previous]
            previous, board = board, rng.choice(neighbors)
        return board

    @staticmethod
    def generate(size: int, steps: int | None = None, seed: int | None = None) -> Board:
        """Return a random *solvable* board of the given size that is not solved."""
        if steps is None:
            steps = size * size * 10
        rng = random.Random(seed)
        start = GameGenerator.solved(size)

        board = GameGenerator.scramble(start, steps, rng)
        # 2×2 walks cycle through 12 boards; one move off the goal is never the goal.
        if board.is_goal():
            board = GameGenerator.scramble(board, 1, rng)
        return board

    @staticmethod
    def unsolvable(size: int, steps: int | None = None, seed: int | None = None) -> Board:
        """Return a random board that cannot reach the goal."""
        return GameGenerator.generate(size, steps, seed).twin()
