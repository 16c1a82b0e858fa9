"""Search tree nodes and their A* ordering."""

from __future__ import annotations

from npuzzle.models.board import Board


class SearchNode:
    """A board reached after ``moves`` moves, linked back to its parent.

    Nodes are never mutated after creation. A node stays alive as long as
    the frontier holds it or a descendant points at it.
    """

    __slots__ = ("board", "parent", "moves", "priority")

    def __init__(self, board: Board, parent: SearchNode | None, moves: int) -> None:
        self.board = board
        self.parent = parent
        self.moves = moves
        self.priority = board.manhattan() + moves

    def __lt__(self, other: SearchNode) -> bool:
        if self is other:
            return False
        return self.priority < other.priority

    def path(self) -> list[Board]:
        """Return the boards from the root down to this node, inclusive."""
        boards: list[Board] = []
        node: SearchNode | None = self
        while node is not None:
            boards.append(node.board)
            node = node.parent
        boards.reverse()
        return boards

    def __repr__(self) -> str:
        return f"SearchNode(moves={self.moves}, priority={self.priority})"
