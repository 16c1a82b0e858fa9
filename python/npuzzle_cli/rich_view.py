"""Rich terminal output: styled tables and panels."""

from __future__ import annotations

import rich.box
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from npuzzle.engine.search import Solver
from npuzzle.models.board import Board


# -- board rendering ----------------------------------------------------------


def tile_style(board: Board, row: int, col: int, moved: tuple[int, int] | None) -> str:
    """Style for one cell: the tile that just slid, then placed / misplaced tiles."""
    if board.get_tile(row, col) == 0:
        return "dim"
    if (row, col) == moved:
        return "bold black on yellow"
    if board.is_tile_correct(row, col):
        return "green"
    return "white"


def render_board(board: Board, previous: Board | None = None) -> Table:
    """Return one solution step as a grid.

    When *previous* is given, the tile that moved from it is highlighted;
    it now sits where the blank used to be.
    """
    moved = previous.blank_pos if previous is not None else None
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        box=rich.box.SQUARE,
        border_style="green" if board.is_goal() else "bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width, justify="right")

    for r, row in enumerate(board.tiles):
        table.add_row(*(
            Text("·" if val == 0 else str(val), style=tile_style(board, r, c, moved))
            for c, val in enumerate(row)
        ))
    return table


# -- report -------------------------------------------------------------------


def run(solver: Solver, console: Console, show_directions: bool = False) -> None:
    if not solver.is_solvable():
        console.print("[bold red]No solution possible[/bold red]")
        return

    console.print(
        f"[bold cyan]Minimum number of moves =[/bold cyan] "
        f"[bold]{solver.move_count()}[/bold]"
    )
    directions = solver.directions() or []
    if show_directions:
        console.print(
            Text("Moves: ", style="cyan")
            + Text(" ".join(d.value for d in directions) or "(none)", style="bold")
        )

    solution = solver.solution() or ()
    previous: Board | None = None
    for i, board in enumerate(solution):
        caption = Text(f"step {i}/{len(solution) - 1}", style="dim")
        if previous is not None:
            tile = board.get_tile(*previous.blank_pos)
            caption.append(f"  tile {tile} {directions[i - 1].value}", style="yellow")
        console.print(
            Panel(
                Group(render_board(board, previous), caption),
                border_style="green" if board.is_goal() else "cyan",
                expand=False,
            )
        )
        previous = board
