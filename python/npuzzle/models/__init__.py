from npuzzle.models.board import Board, Direction
from npuzzle.models.reader import load_board, read_board

__all__ = ["Board", "Direction", "load_board", "read_board"]
