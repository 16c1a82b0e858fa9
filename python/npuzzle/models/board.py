"""Board model for the sliding puzzle."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from functools import cached_property


class Direction(StrEnum):
    """Direction the *tile* travels when it slides into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# Offset from the blank to the tile that slides into it.
# UP   → tile at (br+1, bc) moves up   → blank shifts down
# DOWN → tile at (br-1, bc) moves down → blank shifts up
# LEFT → tile at (br, bc+1) moves left → blank shifts right
# RIGHT→ tile at (br, bc-1) moves right→ blank shifts left
_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}
_DIRECTIONS = {offset: d for d, offset in _OFFSETS.items()}

# Blank moves up, down, left, right.
_BLANK_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(frozen=True)
class Board:
    """An immutable N×N sliding puzzle configuration.

    Tiles are stored as a tuple of row tuples. 0 represents the blank.
    Two boards are equal iff their tile layouts match.
    """

    size: int
    tiles: tuple[tuple[int, ...], ...]
    blank_pos: tuple[int, int] = field(compare=False)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: Sequence[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if size < 2:
            raise ValueError(f"Board size must be at least 2, got {size}.")
        if len(flat) != size * size:
            raise ValueError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        if sorted(flat) != list(range(size * size)):
            raise ValueError(
                f"Tiles must be a permutation of 0..{size * size - 1}."
            )
        tiles = tuple(
            tuple(flat[r * size : (r + 1) * size]) for r in range(size)
        )
        blank = list(flat).index(0)
        return cls(size=size, tiles=tiles, blank_pos=divmod(blank, size))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> Board:
        """Create a board from a list of rows, e.g. ``[[1, 2], [3, 0]]``."""
        size = len(rows)
        for r, row in enumerate(rows):
            if len(row) != size:
                raise ValueError(
                    f"Row {r} has {len(row)} tiles; a {size}×{size} board "
                    f"needs {size}."
                )
        return cls.from_flat(size, [v for row in rows for v in row])

    # -- queries --------------------------------------------------------------

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row][col]

    def is_goal(self) -> bool:
        """Check if all tiles are in their goal positions."""
        expected = 1
        for r in range(self.size):
            for c in range(self.size):
                if r == self.size - 1 and c == self.size - 1:
                    return self.tiles[r][c] == 0
                if self.tiles[r][c] != expected:
                    return False
                expected += 1
        return True

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.tiles[row][col]
        if val == 0:
            return row == self.size - 1 and col == self.size - 1
        expected_row = (val - 1) // self.size
        expected_col = (val - 1) % self.size
        return row == expected_row and col == expected_col

    # -- heuristics -----------------------------------------------------------

    @cached_property
    def _manhattan(self) -> int:
        total = 0
        for r, row in enumerate(self.tiles):
            for c, val in enumerate(row):
                if val == 0:
                    continue
                goal_r, goal_c = divmod(val - 1, self.size)
                total += abs(r - goal_r) + abs(c - goal_c)
        return total

    @cached_property
    def _hamming(self) -> int:
        return sum(
            1
            for r, row in enumerate(self.tiles)
            for c, val in enumerate(row)
            if val != 0 and not self.is_tile_correct(r, c)
        )

    def manhattan(self) -> int:
        """Sum of Manhattan distances between tiles and their goal cells."""
        return self._manhattan

    def hamming(self) -> int:
        """Number of tiles out of place."""
        return self._hamming

    heuristic = manhattan

    # -- derived boards -------------------------------------------------------

    def neighbors(self) -> Iterator[Board]:
        """Yield every board one tile move away, blank moving up, down, left, right."""
        br, bc = self.blank_pos
        for dr, dc in _BLANK_STEPS:
            tr, tc = br + dr, bc + dc
            if 0 <= tr < self.size and 0 <= tc < self.size:
                yield self._swap((br, bc), (tr, tc), blank_pos=(tr, tc))

    def twin(self) -> Board:
        """Return the board with two non-blank tiles of one row exchanged.

        Uses row 0, or row 1 when the blank sits in row 0. Exactly one of a
        board and its twin is solvable.
        """
        row = 1 if self.blank_pos[0] == 0 else 0
        return self._swap((row, 0), (row, 1), blank_pos=self.blank_pos)

    def slide(self, direction: Direction) -> Board | None:
        """Return the board after sliding a tile in *direction*, or ``None``."""
        br, bc = self.blank_pos
        dr, dc = _OFFSETS[direction]
        tr, tc = br + dr, bc + dc
        if not (0 <= tr < self.size and 0 <= tc < self.size):
            return None
        return self._swap((br, bc), (tr, tc), blank_pos=(tr, tc))

    def direction_to(self, other: Board) -> Direction | None:
        """Return the tile move that turns this board into *other*."""
        if other.size != self.size:
            return None
        br, bc = self.blank_pos
        tr, tc = other.blank_pos
        direction = _DIRECTIONS.get((tr - br, tc - bc))
        if direction is None or self.slide(direction) != other:
            return None
        return direction

    # -- helpers --------------------------------------------------------------

    def _swap(
        self,
        a: tuple[int, int],
        b: tuple[int, int],
        blank_pos: tuple[int, int],
    ) -> Board:
        rows = [list(row) for row in self.tiles]
        (ar, ac), (br, bc) = a, b
        rows[ar][ac], rows[br][bc] = rows[br][bc], rows[ar][ac]
        return Board(
            size=self.size,
            tiles=tuple(tuple(row) for row in rows),
            blank_pos=blank_pos,
        )

    def __str__(self) -> str:
        width = len(str(self.size * self.size - 1))
        lines = [str(self.size)]
        for row in self.tiles:
            lines.append(" ".join(f"{val:>{width}}" for val in row))
        return "\n".join(lines)
