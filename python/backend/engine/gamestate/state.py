"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

from backend.models.position import Direction
from backend.models.puzzle import PuzzleState


class GameState:
    """Holds the current puzzle, move counter, and move history."""

    def __init__(self, puzzle: PuzzleState) -> None:
        self.puzzle = puzzle
        self.moves: int = 0
        self.initial: PuzzleState = puzzle.copy()
        self._history: list[tuple[Direction, PuzzleState]] = []

    # -- history --------------------------------------------------------------

    @property
    def history(self) -> list[Direction]:
        return [d for d, _ in self._history]

    def record(self, direction: Direction, previous: PuzzleState) -> None:
        self._history.append((direction, previous))
        self.moves += 1

    def pop(self) -> PuzzleState | None:
        """Forget the last move and return the puzzle as it was before it."""
        if not self._history:
            return None
        _, previous = self._history.pop()
        self.moves -= 1
        return previous

    def reset(self) -> None:
        self.puzzle = self.initial.copy()
        self.moves = 0
        self._history.clear()

    @property
    def is_solved(self) -> bool:
        return self.puzzle.is_goal()
