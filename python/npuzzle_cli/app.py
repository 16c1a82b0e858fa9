"""Command-line interface.

Usage::

    npuzzle solve puzzle.txt            # plain output
    npuzzle solve puzzle.txt -f rich    # Rich terminal output
    npuzzle generate 3 --seed 7 | npuzzle solve
"""

import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console

from npuzzle.engine.generator import GameGenerator
from npuzzle.engine.search import Solver
from npuzzle.models.board import Board
from npuzzle.models.reader import load_board, read_board
from npuzzle_cli import rich_view, vanilla

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
MIN_SIZE = 2
MAX_SIZE = 8

logger = logging.getLogger(__name__)


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def _read_input(path: Optional[Path]) -> Board:
    if path is None or str(path) == "-":
        return read_board(sys.stdin.read())
    return load_board(path)


def _fail(message: str) -> NoReturn:
    Console(stderr=True).print(f"[bold red]Error:[/bold red] {message}")
    raise typer.Exit(code=1)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, help="Optimal sliding puzzle solver.")


@app.command()
def solve(
    path: Optional[Path] = typer.Argument(
        None,
        help="Board file (N, then N×N tiles, 0 = blank). Reads stdin if omitted or '-'.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="Output style.",
    ),
    directions: bool = typer.Option(
        False, "--directions",
        help="Also list the tile moves.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress to stderr.",
    ),
) -> None:
    """Solve a board and print a shortest solution."""
    _configure_logging(verbose)
    try:
        board = _read_input(path)
    except (ValueError, OSError) as exc:
        logger.debug("Rejected input %s", path, exc_info=True)
        _fail(str(exc))

    solver = Solver(board)

    if frontend is Frontend.rich:
        rich_view.run(solver, Console(), show_directions=directions)
    else:
        vanilla.run(solver, sys.stdout, show_directions=directions)


@app.command()
def generate(
    size: int = typer.Argument(
        ..., min=MIN_SIZE, max=MAX_SIZE,
        help=f"Grid size ({MIN_SIZE}-{MAX_SIZE}).",
    ),
    steps: Optional[int] = typer.Option(
        None, "--steps", min=0,
        help="Random moves away from the goal (default size×size×10).",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed."),
    unsolvable: bool = typer.Option(
        False, "--unsolvable",
        help="Emit a board that cannot be solved.",
    ),
) -> None:
    """Print a scrambled board in the solver's input format."""
    if unsolvable:
        board = GameGenerator.unsolvable(size, steps, seed)
    else:
        board = GameGenerator.generate(size, steps, seed)
    typer.echo(str(board))


if __name__ == "__main__":
    app()
