"""Sliding puzzle solver.

Runs A* with the Manhattan heuristic on the initial board and, in
lockstep, on its twin. Exactly one of the two is solvable, so the first
instance to dequeue a goal board decides the outcome.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from npuzzle.engine.search.frontier import Frontier
from npuzzle.models.board import Board, Direction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchResult:
    solvable: bool
    moves: int
    solution: tuple[Board, ...] | None
    iterations: int


class Solver:
    """Finds a shortest solution for *initial*, eagerly, on construction."""

    def __init__(self, initial: Board) -> None:
        self.initial = initial
        self.result = self._search(initial)

    # -- search ---------------------------------------------------------------

    @staticmethod
    def _search(initial: Board) -> SearchResult:
        twin = initial.twin()
        logger.debug(
            "Starting search on %d×%d board (manhattan=%d)",
            initial.size, initial.size, initial.manhattan(),
        )
        main = Frontier(initial)
        shadow = Frontier(twin)

        iterations = 0
        while True:
            iterations += 1
            node = main.step()
            twin_node = shadow.step()
            if node.board.is_goal() or twin_node.board.is_goal():
                break

        if node.board.is_goal():
            solution = tuple(node.path())
            logger.info(
                "Solved in %d moves after %d iterations (%d nodes expanded)",
                len(solution) - 1, iterations, main.expanded,
            )
            return SearchResult(
                solvable=True,
                moves=len(solution) - 1,
                solution=solution,
                iterations=iterations,
            )

        logger.info("Twin reached the goal after %d iterations: unsolvable", iterations)
        return SearchResult(
            solvable=False, moves=-1, solution=None, iterations=iterations
        )

    # -- results --------------------------------------------------------------

    def is_solvable(self) -> bool:
        """Return True if the initial board can reach the goal."""
        return self.result.solvable

    def move_count(self) -> int:
        """Minimum number of moves to solve the initial board; -1 if unsolvable."""
        return self.result.moves

    moves = move_count

    def solution(self) -> tuple[Board, ...] | None:
        """Boards of a shortest solution, initial to goal; None if unsolvable."""
        return self.result.solution

    @property
    def iterations(self) -> int:
        return self.result.iterations

    def directions(self) -> list[Direction] | None:
        """Tile moves along the solution, or None if unsolvable."""
        solution = self.result.solution
        if solution is None:
            return None
        return [
            prev.direction_to(nxt) for prev, nxt in zip(solution, solution[1:])
        ]

    # -- convenience ----------------------------------------------------------

    @staticmethod
    def solve(board: Board) -> list[Direction]:
        """Return a shortest move sequence for *board*, or ``[]`` if unsolvable."""
        if board.is_goal():
            return []
        return Solver(board).directions() or []

    @staticmethod
    def hint(board: Board) -> Direction | None:
        """Return the first move of a shortest solution, or ``None`` if solved / unsolvable."""
        moves = Solver.solve(board)
        return moves[0] if moves else None
