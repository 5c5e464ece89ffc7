"""Exceptions raised by the puzzle model."""

from __future__ import annotations

from backend.models.position import Direction


class PuzzleError(ValueError):
    """Base class for puzzle model errors."""


class InvalidConfiguration(PuzzleError):
    """The pieces cannot be placed as requested."""


class IllegalMove(PuzzleError):
    """The block cannot be moved in the requested direction."""

    def __init__(self, direction: Direction, state: str) -> None:
        super().__init__(f"Cannot move {direction.name} from {state}.")
        self.direction = direction
        self.state = state
