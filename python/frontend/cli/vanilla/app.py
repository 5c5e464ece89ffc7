"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, ANSI codes, tty/termios) for rendering and input.
Prints solution traces and runs an interactive play session.
"""

from __future__ import annotations

import sys
import time

from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import BreadthFirstSearch, SearchStats, Solver
from backend.models.puzzle import BOARD_SIZE, Piece, PuzzleState
from backend.models.position import Direction, Position
from frontend.cli.input_handler import DIRECTION_KEYS, get_key


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_DIM = "\033[2m"     # dim
_BOLD = "\033[1m"    # bold
_R = "\033[0m"       # reset

_PIECES: dict[Piece, str] = {
    Piece.BLOCK: f"{_BOLD}#{_R}",
    Piece.RED_SHOE: f"\033[31;1mR{_R}",
    Piece.BLUE_SHOE: f"\033[34;1mB{_R}",
    Piece.BLACK_SHOE: f"\033[90;1mK{_R}",
}
_CELL_W = len(Piece) + 2


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


def _stats_line(stats: SearchStats) -> str:
    return (
        f"expanded={stats.expanded} generated={stats.generated} "
        f"duplicates={stats.duplicates} max_frontier={stats.max_frontier}"
    )


# -- board rendering ----------------------------------------------------------


def _render_board(puzzle: PuzzleState) -> str:
    """Return an ANSI-coloured text representation of the board."""
    sep = "+" + (("-" * _CELL_W + "+") * BOARD_SIZE)

    lines: list[str] = [sep]
    for r in range(BOARD_SIZE):
        cells: list[str] = []
        for c in range(BOARD_SIZE):
            here = [p for p in Piece if puzzle.get_position(p) == Position(r, c)]
            if not here:
                cells.append(f"{_DIM}{'·':^{_CELL_W}}{_R}")
                continue
            # Pad on the visible width, the escape codes take no room.
            pad = _CELL_W - len(here)
            left = pad // 2
            cells.append(" " * left + "".join(_PIECES[p] for p in here) + " " * (pad - left))
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


# -- solution trace -----------------------------------------------------------


def print_solution(puzzle: PuzzleState, show_stats: bool = False) -> bool:
    """Print a shortest solution, one path entry per line.

    Returns True if a solution was found.
    """
    engine = BreadthFirstSearch()
    goal = engine.search(puzzle)
    if goal is None:
        print("No solution found")
    else:
        for node in engine.path_to(goal):
            print(node)
    if show_stats:
        print(_stats_line(engine.stats))
    return goal is not None


# -- solver helpers -----------------------------------------------------------


def _apply_hint(game: GamePlay) -> str:
    """Apply a single solver hint.  Returns a status message."""
    hint = Solver.hint(game.puzzle)
    if hint is None:
        if game.is_won:
            return f"{_G}Already solved!{_R}"
        return f"{_Y}No solution from here. Undo or restart.{_R}"
    game.move(hint)
    return f"{_C}Hint:{_R} moved {_BOLD}{hint.name}{_R}"


def _auto_solve(game: GamePlay) -> str:
    """Run the solver and animate moves.  Returns a status message."""
    moves = Solver.solve(game.puzzle)
    if not moves:
        if game.is_won:
            return f"{_G}Already solved!{_R}"
        return "No solution from here."

    for i, direction in enumerate(moves):
        game.move(direction)
        _clear()
        print(f"  {_C}=== Solving… ==={_R}")
        print()
        print(_render_board(game.puzzle))
        print()
        print(f"  Move {i + 1}/{len(moves)}  ({direction.name})")
        sys.stdout.flush()
        time.sleep(0.3)

    return f"{_G}Solved in {len(moves)} moves!{_R}"


# -- game screen --------------------------------------------------------------


def _show_game(game: GamePlay, status: str = "") -> None:
    _clear()
    print(f"  {_C}=== Shoe Puzzle ==={_R}")
    print()
    print(_render_board(game.puzzle))
    print()
    legal = ", ".join(d.name for d in Direction if d in game.legal_moves)
    print(f"  Moves: {_Y}{game.state.moves}{_R}  |  Legal: {legal or '-'}")
    print(
        f"  {_C}WASD{_R}/{_C}Arrows{_R}: move  |  "
        f"{_C}U{_R}: undo  |  "
        f"{_C}N{_R}: hint  |  "
        f"{_C}V{_R}: solve  |  "
        f"{_C}R{_R}: restart  |  "
        f"{_C}Q{_R}: quit"
    )
    if status:
        print(f"\n  {status}")


# -- game loop ----------------------------------------------------------------


def run(puzzle: PuzzleState) -> None:
    """Play *puzzle* interactively until it is solved or the player quits."""
    game = GamePlay.from_state(puzzle)
    status = ""

    while True:
        _show_game(game, status)
        status = ""
        if game.is_won:
            print(f"\n  {_G}★ Solved in {game.state.moves} moves! ★{_R}")
            print(f"\n  Press {_C}R{_R} to play again, {_C}Q{_R} to quit.")

        key = get_key()

        if key in DIRECTION_KEYS:
            if game.is_won:
                continue
            if not game.move(DIRECTION_KEYS[key]):
                status = f"{_Y}Cannot move {DIRECTION_KEYS[key].name}.{_R}"
        elif key == "undo":
            if not game.undo():
                status = f"{_DIM}Nothing to undo.{_R}"
        elif key == "hint":
            status = _apply_hint(game)
        elif key == "solve":
            status = _auto_solve(game)
        elif key == "restart":
            game.restart()
        elif key == "quit":
            _clear()
            print("  Goodbye!\n")
            return
