"""Plain-text output: no third-party dependencies."""

from __future__ import annotations

from typing import TextIO

from npuzzle.engine.search import Solver


def format_result(solver: Solver, show_directions: bool = False) -> str:
    """Return the printable report for a finished search."""
    if not solver.is_solvable():
        return "No solution possible"

    lines = [f"Minimum number of moves = {solver.move_count()}"]
    if show_directions:
        directions = solver.directions() or []
        lines.append("Moves: " + (" ".join(d.value for d in directions) or "(none)"))
    for board in solver.solution() or ():
        lines.append("")
        lines.append(str(board))
    return "\n".join(lines)


def run(solver: Solver, out: TextIO, show_directions: bool = False) -> None:
    out.write(format_result(solver, show_directions) + "\n")
