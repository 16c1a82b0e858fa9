"""CLI tests via Typer's runner."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from npuzzle.engine.generator import GameGenerator
from npuzzle.engine.search import Solver
from npuzzle.models.reader import read_board
from npuzzle_cli.app import app
from npuzzle_cli.vanilla import format_result

runner = CliRunner()

ONE_MOVE = "3\n1 2 3\n4 5 6\n7 0 8\n"


def test_solve_from_file(tmp_path: Path) -> None:
    path = tmp_path / "puzzle.txt"
    path.write_text(ONE_MOVE)
    result = runner.invoke(app, ["solve", str(path)])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0] == "Minimum number of moves = 1"
    assert lines[1:] == ["", "3", "1 2 3", "4 5 6", "7 0 8", "", "3", "1 2 3", "4 5 6", "7 8 0"]


def test_solve_from_stdin_with_directions() -> None:
    result = runner.invoke(app, ["solve", "--directions"], input=ONE_MOVE)
    assert result.exit_code == 0
    assert "Moves: left" in result.output


def test_solve_unsolvable() -> None:
    board = GameGenerator.solved(3).twin()
    result = runner.invoke(app, ["solve", "-"], input=str(board))
    assert result.exit_code == 0
    assert result.output.strip() == "No solution possible"


def test_solve_rich_frontend() -> None:
    result = runner.invoke(app, ["solve", "-f", "rich", "--directions"], input=ONE_MOVE)
    assert result.exit_code == 0
    assert "Minimum number of moves" in result.output
    assert "tile 8 left" in result.output


def test_solve_rejects_malformed_input() -> None:
    result = runner.invoke(app, ["solve"], input="3\n1 2 3\n")
    assert result.exit_code == 1


def test_solve_missing_file(tmp_path: Path) -> None:
    result = runner.invoke(app, ["solve", str(tmp_path / "nope.txt")])
    assert result.exit_code == 1


def test_generate_round_trips_through_reader() -> None:
    result = runner.invoke(app, ["generate", "3", "--seed", "4", "--steps", "12"])
    assert result.exit_code == 0
    board = read_board(result.output)
    assert board == GameGenerator.generate(3, steps=12, seed=4)


def test_generate_unsolvable() -> None:
    result = runner.invoke(app, ["generate", "2", "--seed", "1", "--unsolvable"])
    assert result.exit_code == 0
    assert not Solver(read_board(result.output)).is_solvable()


def test_generate_rejects_size_out_of_range() -> None:
    result = runner.invoke(app, ["generate", "9"])
    assert result.exit_code != 0


@pytest.mark.timeout(5)
def test_generate_2x2_full_cycle() -> None:
    result = runner.invoke(app, ["generate", "2", "--steps", "12", "--seed", "0"])
    assert result.exit_code == 0
    assert not read_board(result.output).is_goal()


def test_format_result_goal_board() -> None:
    text = format_result(Solver(GameGenerator.solved(2)), show_directions=True)
    assert text.splitlines() == ["Minimum number of moves = 0", "Moves: (none)", "", "2", "1 2", "3 0"]
