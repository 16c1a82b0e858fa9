"""Replays tile moves against a board and tracks the win condition."""

from __future__ import annotations

from npuzzle.models.board import Board, Direction


class GamePlay:
    """Applies moves to a board, one at a time."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.moves: int = 0

    @classmethod
    def from_board(cls, board: Board) -> GamePlay:
        return cls(board)

    # -- movement (direction = where the *tile* moves) ------------------------

    def move(self, direction: Direction) -> bool:
        """Slide a tile in *direction* into the adjacent blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Returns True if the move was valid.
        """
        nxt = self.board.slide(direction)
        if nxt is None:
            return False
        self.board = nxt
        self.moves += 1
        return True

    def move_tile(self, row: int, col: int) -> bool:
        """Move a tile at (row, col) into the adjacent blank.

        Returns True if the tile was adjacent to the blank and the move
        was applied.
        """
        br, bc = self.board.blank_pos
        if abs(row - br) + abs(col - bc) != 1:
            return False
        for nxt in self.board.neighbors():
            if nxt.blank_pos == (row, col):
                self.board = nxt
                self.moves += 1
                return True
        return False

    def replay(self, directions: list[Direction]) -> int:
        """Apply *directions* in order; return how many were applied before an invalid one."""
        for i, direction in enumerate(directions):
            if not self.move(direction):
                return i
        return len(directions)

    @property
    def is_won(self) -> bool:
        return self.board.is_goal()
