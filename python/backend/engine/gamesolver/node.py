"""Search tree nodes."""

from __future__ import annotations

from backend.models.position import Direction
from backend.models.puzzle import PuzzleState


class SearchNode:
    """A puzzle state reached by a particular move from a parent node.

    Children are produced one at a time from the moves that were legal
    when the node was created.  Two nodes are equal when their states
    are equal, whatever path led to them.
    """

    __slots__ = ("state", "parent", "direction", "_operators")

    def __init__(
        self,
        state: PuzzleState,
        parent: SearchNode | None = None,
        direction: Direction | None = None,
    ) -> None:
        self.state = state
        self.parent = parent
        self.direction = direction
        legal = state.legal_moves()
        self._operators: list[Direction] = [d for d in Direction if d in legal]

    # -- children -------------------------------------------------------------

    def has_next_child(self) -> bool:
        return bool(self._operators)

    def next_child(self) -> SearchNode | None:
        """Return the child for the next unexplored move, or ``None``."""
        if not self._operators:
            return None
        direction = self._operators.pop(0)
        state = self.state.copy()
        state.move(direction)
        return SearchNode(state, self, direction)

    # -- queries --------------------------------------------------------------

    @property
    def depth(self) -> int:
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SearchNode):
            return NotImplemented
        return self.state == other.state

    def __hash__(self) -> int:
        return hash(self.state)

    def __str__(self) -> str:
        if self.direction is None:
            return str(self.state)
        return f"{self.direction.name} {self.state}"

    def __repr__(self) -> str:
        return f"SearchNode({self})"
