"""Core gameplay logic — processes moves and checks win condition."""

from __future__ import annotations

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamestate import GameState
from backend.models.errors import IllegalMove
from backend.models.position import Direction
from backend.models.puzzle import PuzzleState


class GamePlay:
    """Orchestrates a single game session."""

    def __init__(self) -> None:
        self.state = GameState(GameGenerator.initial())

    @classmethod
    def from_state(cls, puzzle: PuzzleState) -> "GamePlay":
        """Create a game session from an existing puzzle (e.g. parsed from the command line)."""
        obj = object.__new__(cls)
        obj.state = GameState(puzzle.copy())
        return obj

    # -- movement -------------------------------------------------------------

    def move(self, direction: Direction) -> bool:
        """Move the block in *direction*.

        Returns True if the move was legal and applied; an illegal move
        leaves the session untouched.
        """
        previous = self.state.puzzle.copy()
        try:
            self.state.puzzle.move(direction)
        except IllegalMove:
            return False
        self.state.record(direction, previous)
        return True

    def undo(self) -> bool:
        """Take back the last move.  Returns False if there is nothing to undo."""
        previous = self.state.pop()
        if previous is None:
            return False
        self.state.puzzle = previous
        return True

    def restart(self) -> None:
        self.state.reset()

    # -- queries --------------------------------------------------------------

    @property
    def puzzle(self) -> PuzzleState:
        return self.state.puzzle

    @property
    def legal_moves(self) -> set[Direction]:
        return self.state.puzzle.legal_moves()

    @property
    def is_won(self) -> bool:
        return self.state.is_solved
