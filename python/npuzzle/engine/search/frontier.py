"""A single A* search instance over one root board."""

from __future__ import annotations

import heapq

from npuzzle.engine.search.node import SearchNode
from npuzzle.models.board import Board


class Frontier:
    """Min-priority queue of unexpanded nodes, seeded with one root.

    Each instance owns its own heap; two frontiers never share nodes.
    """

    def __init__(self, root: Board) -> None:
        self.root = root
        self._heap: list[SearchNode] = [SearchNode(root, None, 0)]
        self.expanded: int = 0

    def __len__(self) -> int:
        return len(self._heap)

    def step(self) -> SearchNode:
        """Remove the cheapest node and expand it unless it is a goal.

        The neighbor equal to the node's parent board is skipped; no other
        duplicate detection is done.
        """
        node = heapq.heappop(self._heap)
        if node.board.is_goal():
            return node

        previous = node.parent.board if node.parent is not None else None
        for neighbor in node.board.neighbors():
            if neighbor == previous:
                continue
            heapq.heappush(self._heap, SearchNode(neighbor, node, node.moves + 1))
        self.expanded += 1
        return node
