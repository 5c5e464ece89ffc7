from backend.engine.gamesolver.node import SearchNode
from backend.engine.gamesolver.solver import BreadthFirstSearch, SearchStats, Solver

__all__ = ["BreadthFirstSearch", "SearchNode", "SearchStats", "Solver"]
