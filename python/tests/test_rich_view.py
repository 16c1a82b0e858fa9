"""Rich rendering of solution steps."""

from __future__ import annotations

from rich.console import Console

from npuzzle.engine.generator import GameGenerator
from npuzzle.engine.search import Solver
from npuzzle.models.board import Board, Direction
from npuzzle_cli.rich_view import render_board, run, tile_style


def test_tile_style_highlights_moved_tile() -> None:
    previous = Board.from_rows([[1, 2, 3], [4, 5, 6], [7, 0, 8]])
    board = previous.slide(Direction.LEFT)
    assert board is not None and board.is_goal()

    moved = previous.blank_pos
    assert tile_style(board, 2, 1, moved) == "bold black on yellow"
    assert tile_style(board, 0, 0, moved) == "green"
    assert tile_style(board, 2, 2, moved) == "dim"


def test_tile_style_without_previous_step() -> None:
    board = Board.from_rows([[2, 1], [3, 0]])
    assert tile_style(board, 0, 0, None) == "white"
    assert tile_style(board, 1, 0, None) == "green"


def test_render_board_shape() -> None:
    table = render_board(GameGenerator.solved(3))
    assert len(table.columns) == 3
    assert table.row_count == 3


def test_run_prints_each_step() -> None:
    console = Console(record=True, width=60)
    board = Board.from_rows([[1, 2, 3], [4, 5, 0], [7, 8, 6]])
    run(Solver(board), console, show_directions=True)
    text = console.export_text()
    assert "Minimum number of moves = 1" in text
    assert "step 0/1" in text
    assert "step 1/1" in text
    assert "tile 6 up" in text


def test_run_unsolvable() -> None:
    console = Console(record=True, width=60)
    run(Solver(GameGenerator.solved(3).twin()), console)
    assert "No solution possible" in console.export_text()
