"""Breadth-first puzzle solver."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass

from backend.engine.gamesolver.node import SearchNode
from backend.models.position import Direction
from backend.models.puzzle import PuzzleState

logger = logging.getLogger(__name__)


@dataclass
class SearchStats:
    """Counters collected during one search."""

    expanded: int = 0
    generated: int = 0
    duplicates: int = 0
    max_frontier: int = 0
    depth: int | None = None

    @property
    def solved(self) -> bool:
        return self.depth is not None


class BreadthFirstSearch:
    """Graph search over puzzle states in order of increasing move count.

    States are marked as seen when they are queued, so each state is
    queued at most once.  The first goal taken off the queue is
    therefore reached by a shortest move sequence.
    """

    def __init__(self) -> None:
        self.stats = SearchStats()

    def search(self, state: PuzzleState) -> SearchNode | None:
        """Return the node of a nearest goal state, or ``None`` if none is reachable."""
        stats = SearchStats()
        self.stats = stats
        logger.debug("Searching from %s", state)

        start = SearchNode(state)
        frontier: deque[SearchNode] = deque([start])
        seen: set[SearchNode] = {start}
        stats.max_frontier = 1

        while frontier:
            selected = frontier.popleft()
            if selected.state.is_goal():
                stats.depth = selected.depth
                logger.debug("Goal %s found at depth %d (%s)", selected.state, stats.depth, stats)
                return selected

            stats.expanded += 1
            while selected.has_next_child():
                child = selected.next_child()
                stats.generated += 1
                if child in seen:
                    stats.duplicates += 1
                    continue
                frontier.append(child)
                seen.add(child)
            stats.max_frontier = max(stats.max_frontier, len(frontier))

        logger.debug("No solution from %s (%s)", state, stats)
        return None

    # -- paths ----------------------------------------------------------------

    @staticmethod
    def path_to(node: SearchNode) -> list[SearchNode]:
        """Return the nodes from the root down to *node*."""
        path: list[SearchNode] = []
        current: SearchNode | None = node
        while current is not None:
            path.append(current)
            current = current.parent
        path.reverse()
        return path

    @staticmethod
    def reconstruct_path(node: SearchNode) -> list[tuple[Direction | None, PuzzleState]]:
        """Return ``(direction, state)`` pairs from the root down to *node*.

        The root comes first and has no direction.
        """
        return [(n.direction, n.state) for n in BreadthFirstSearch.path_to(node)]


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(state: PuzzleState) -> list[Direction]:
        """Return a shortest move sequence that solves *state*, or ``[]`` if solved / unsolvable."""
        if state.is_goal():
            return []

        node = BreadthFirstSearch().search(state)
        if node is None:
            return []
        return [d for d, _ in BreadthFirstSearch.reconstruct_path(node) if d is not None]

    @staticmethod
    def hint(state: PuzzleState) -> Direction | None:
        """Return the first move of a shortest solution, or ``None`` if solved / unsolvable."""
        moves = Solver.solve(state)
        return moves[0] if moves else None

    @staticmethod
    def is_solvable(state: PuzzleState) -> bool:
        """Return True if *state* can reach a goal state."""
        return BreadthFirstSearch().search(state) is not None
