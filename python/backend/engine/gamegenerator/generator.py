"""Generates starting positions for the puzzle."""

from __future__ import annotations

import random

from backend.models.position import Direction
from backend.models.puzzle import PuzzleState

DEFAULT_SCRAMBLE_STEPS = 30

_OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class GameGenerator:
    """Creates puzzles by playing random legal moves from the original layout."""

    @staticmethod
    def initial() -> PuzzleState:
        """Return the original starting layout."""
        return PuzzleState()

    @staticmethod
    def scramble(
        puzzle: PuzzleState, steps: int, rng: random.Random | None = None
    ) -> None:
        """Scramble *puzzle* in-place using up to *steps* random legal moves.

        Stops early if the block gets stuck.
        """
        rng = rng or random.Random()
        prev: Direction | None = None

        for _ in range(steps):
            # Sorted so that a seeded rng gives the same puzzle every run.
            moves = sorted(puzzle.legal_moves(), key=list(Direction).index)
            if not moves:
                return
            back = _OPPOSITE[prev] if prev is not None else None
            if back in moves and len(moves) > 1:
                moves.remove(back)
            prev = rng.choice(moves)
            puzzle.move(prev)

    @staticmethod
    def generate(
        steps: int = DEFAULT_SCRAMBLE_STEPS, seed: int | None = None
    ) -> PuzzleState:
        """Return a random unsolved puzzle reachable from the original layout."""
        rng = random.Random(seed)
        while True:
            puzzle = GameGenerator.initial()
            GameGenerator.scramble(puzzle, steps, rng)
            if not puzzle.is_goal():
                return puzzle
