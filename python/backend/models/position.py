"""Board coordinates and the four block moves."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Direction(StrEnum):
    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"


# (row, col) offset of one step in each direction.
_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.RIGHT: (0, 1),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
}


@dataclass(frozen=True)
class Position:
    """A cell on the board.

    Positions are plain values: two positions with the same row and
    column are equal and hash the same.  No bounds are checked here,
    the board decides what is on it.
    """

    row: int
    col: int

    def move(self, direction: Direction) -> Position:
        dr, dc = _OFFSETS[direction]
        return Position(self.row + dr, self.col + dc)

    def move_up(self) -> Position:
        return self.move(Direction.UP)

    def move_right(self) -> Position:
        return self.move(Direction.RIGHT)

    def move_down(self) -> Position:
        return self.move(Direction.DOWN)

    def move_left(self) -> Position:
        return self.move(Direction.LEFT)

    def __str__(self) -> str:
        return f"({self.row},{self.col})"
