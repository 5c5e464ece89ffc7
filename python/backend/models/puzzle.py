"""Puzzle model: a block and three shoes on a 3×3 board.

The block is the only piece that moves by itself.  When it moves it may
carry the shoes standing on its cell, and in some directions it may
step onto a shoe.  The puzzle is solved once the red and the blue shoe
end up on the same cell.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from enum import IntEnum

from backend.models.errors import IllegalMove, InvalidConfiguration
from backend.models.position import Direction, Position

BOARD_SIZE = 3


class Piece(IntEnum):
    BLOCK = 0
    RED_SHOE = 1
    BLUE_SHOE = 2
    BLACK_SHOE = 3


_INITIAL = (
    Position(0, 0),
    Position(2, 0),
    Position(1, 1),
    Position(0, 2),
)

# Shoes carried by the block when it moves right, down or left, in the
# order they are moved.  Moving up is handled separately.
_CARRIED: dict[Direction, tuple[Piece, ...]] = {
    Direction.RIGHT: (Piece.RED_SHOE, Piece.BLUE_SHOE, Piece.BLACK_SHOE),
    Direction.DOWN: (Piece.RED_SHOE, Piece.BLUE_SHOE, Piece.BLACK_SHOE),
    Direction.LEFT: (Piece.RED_SHOE, Piece.BLUE_SHOE),
}

_PAIR = re.compile(r"(-?\d+)\s*,\s*(-?\d+)")
_NUMBERS = r"\s*-?\d+\s*,\s*-?\d+\s*"
# "[(0,0),(2,0),(1,1),(0,2)]"
_RENDERED = re.compile(rf"\s*\[\s*\({_NUMBERS}\)(?:\s*,\s*\({_NUMBERS}\))*\s*\]\s*")
# "0,0 2,0 1,1 0,2"
_SHORT = re.compile(rf"{_NUMBERS}(?:\s{_NUMBERS})*")


class PuzzleState:
    """Positions of the four pieces, indexed by :class:`Piece`.

    ``PuzzleState()`` is the original starting layout.  Any other layout
    is given as four positions in ``Piece`` order::

        PuzzleState(Position(1, 1), Position(2, 0),
                    Position(1, 1), Position(0, 2))

    The only way to change a state is :meth:`move`.
    """

    __slots__ = ("_positions",)

    def __init__(self, *positions: Position) -> None:
        if not positions:
            positions = _INITIAL
        self._check_positions(positions)
        self._positions: list[Position] = list(positions)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[int, int]]) -> PuzzleState:
        """Create a state from ``(row, col)`` pairs in ``Piece`` order."""
        return cls(*(Position(row, col) for row, col in pairs))

    @classmethod
    def parse(cls, text: str) -> PuzzleState:
        """Create a state from text.

        Both the rendered form ``[(0,0),(2,0),(1,1),(0,2)]`` and the
        shorter ``0,0 2,0 1,1 0,2`` are accepted.
        """
        if not (_RENDERED.fullmatch(text) or _SHORT.fullmatch(text)):
            raise InvalidConfiguration(f"Cannot parse a puzzle state from {text!r}.")
        pairs = [(int(r), int(c)) for r, c in _PAIR.findall(text)]
        return cls.from_pairs(pairs)

    @staticmethod
    def _check_positions(positions: tuple[Position, ...]) -> None:
        if len(positions) != len(Piece):
            raise InvalidConfiguration(
                f"Expected {len(Piece)} positions, got {len(positions)}."
            )
        for piece, position in zip(Piece, positions):
            if not isinstance(position, Position):
                raise InvalidConfiguration(
                    f"{piece.name} must be a Position, got {position!r}."
                )
            if not all(
                isinstance(v, int) and not isinstance(v, bool) for v in (position.row, position.col)
            ):
                raise InvalidConfiguration(
                    f"{piece.name} needs integer coordinates, got {position!r}."
                )
            if not is_on_board(position):
                raise InvalidConfiguration(f"{piece.name} at {position} is off the board.")
        if positions[Piece.BLUE_SHOE] == positions[Piece.BLACK_SHOE]:
            raise InvalidConfiguration(
                f"The blue and the black shoe cannot share {positions[Piece.BLUE_SHOE]}."
            )

    # -- queries --------------------------------------------------------------

    def get_position(self, piece: int) -> Position:
        return self._positions[piece]

    @property
    def positions(self) -> tuple[Position, ...]:
        return tuple(self._positions)

    def is_goal(self) -> bool:
        """Check if the red and the blue shoe are on the same cell."""
        return self._same_position(Piece.RED_SHOE, Piece.BLUE_SHOE)

    def is_empty(self, position: Position) -> bool:
        return position not in self._positions

    def can_move(self, direction: Direction) -> bool:
        """Check if the block can be moved in *direction*."""
        direction = Direction(direction)
        block = self._positions[Piece.BLOCK]
        if not is_on_board(block.move(direction)):
            return False
        if direction is Direction.UP or direction is Direction.LEFT:
            return self.is_empty(block.move(direction))
        if direction is Direction.RIGHT:
            return self._can_move_right()
        return self._can_move_down()

    def _can_move_right(self) -> bool:
        right = self._positions[Piece.BLOCK].move_right()
        if self.is_empty(right):
            return True
        # The block may step onto the black shoe unless the blue shoe
        # would have to share its cell.
        return self._positions[Piece.BLACK_SHOE] == right and not self._same_position(
            Piece.BLOCK, Piece.BLUE_SHOE
        )

    def _can_move_down(self) -> bool:
        down = self._positions[Piece.BLOCK].move_down()
        if self.is_empty(down):
            return True
        if self._same_position(Piece.BLACK_SHOE, Piece.BLOCK):
            return False
        if self._positions[Piece.BLUE_SHOE] == down:
            return True
        return self._positions[Piece.RED_SHOE] == down and not self._same_position(
            Piece.BLUE_SHOE, Piece.BLOCK
        )

    def legal_moves(self) -> set[Direction]:
        """Return the directions the block can currently move in."""
        return {d for d in Direction if self.can_move(d)}

    # -- moves ----------------------------------------------------------------

    def move(self, direction: Direction) -> None:
        """Move the block in *direction*, carrying the shoes on its cell.

        Raises :class:`IllegalMove` without touching the state when
        ``can_move(direction)`` is false.
        """
        direction = Direction(direction)
        if not self.can_move(direction):
            raise IllegalMove(direction, str(self))
        if direction is Direction.UP:
            self._move_up()
        else:
            self._carry(direction, *_CARRIED[direction])

    def _move_up(self) -> None:
        # Shoes only travel up when the black shoe is on the block.
        if self._same_position(Piece.BLACK_SHOE, Piece.BLOCK):
            if self._same_position(Piece.RED_SHOE, Piece.BLOCK):
                self._move_piece(Piece.RED_SHOE, Direction.UP)
            self._move_piece(Piece.BLACK_SHOE, Direction.UP)
        self._move_piece(Piece.BLOCK, Direction.UP)

    def _carry(self, direction: Direction, *shoes: Piece) -> None:
        for shoe in shoes:
            if self._same_position(shoe, Piece.BLOCK):
                self._move_piece(shoe, direction)
        self._move_piece(Piece.BLOCK, direction)

    def _move_piece(self, piece: Piece, direction: Direction) -> None:
        self._positions[piece] = self._positions[piece].move(direction)

    # -- helpers --------------------------------------------------------------

    def _same_position(self, a: Piece, b: Piece) -> bool:
        return self._positions[a] == self._positions[b]

    def copy(self) -> PuzzleState:
        clone = object.__new__(PuzzleState)
        clone._positions = self._positions[:]
        return clone

    __copy__ = copy

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PuzzleState):
            return NotImplemented
        return self._positions == other._positions

    def __hash__(self) -> int:
        return hash(tuple(self._positions))

    def __str__(self) -> str:
        return "[" + ",".join(str(p) for p in self._positions) + "]"

    def __repr__(self) -> str:
        return f"PuzzleState({self})"


def is_on_board(position: Position) -> bool:
    return 0 <= position.row < BOARD_SIZE and 0 <= position.col < BOARD_SIZE
