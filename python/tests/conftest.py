"""Shared oracles for the solver tests.

Ground truth comes from two independent sources: an exhaustive
breadth-first search over every 3×3 configuration reachable from the
goal, and the classic inversion-parity solvability rule.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable

import pytest

from npuzzle.engine.generator import GameGenerator
from npuzzle.models.board import Board


# -- solvability (self-contained, no dependency on Solver) --------------------


def _parity_solvable(board: Board) -> bool:
    n = board.size
    flat = [v for row in board.tiles for v in row if v != 0]
    inversions = 0
    for i in range(len(flat)):
        for j in range(i + 1, len(flat)):
            if flat[i] > flat[j]:
                inversions += 1
    if n % 2 == 1:
        return inversions % 2 == 0
    blank_row_from_bottom = n - 1 - board.blank_pos[0]
    return (inversions + blank_row_from_bottom) % 2 == 0


# -- breadth-first reference ---------------------------------------------------


def bfs_distances(size: int) -> dict[Board, int]:
    """Distance from every solvable board to the goal (moves are reversible)."""
    goal = GameGenerator.solved(size)
    dist = {goal: 0}
    queue = deque([goal])
    while queue:
        board = queue.popleft()
        d = dist[board] + 1
        for neighbor in board.neighbors():
            if neighbor not in dist:
                dist[neighbor] = d
                queue.append(neighbor)
    return dist


@pytest.fixture(scope="session")
def distances_3x3() -> dict[Board, int]:
    return bfs_distances(3)


@pytest.fixture(scope="session")
def distances_2x2() -> dict[Board, int]:
    return bfs_distances(2)


@pytest.fixture(scope="session")
def parity_solvable() -> Callable[[Board], bool]:
    return _parity_solvable
