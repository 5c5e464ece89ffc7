"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
input handler and backend as the vanilla CLI.
"""

from __future__ import annotations

import time

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import BreadthFirstSearch, SearchStats, Solver
from backend.models.position import Direction, Position
from backend.models.puzzle import BOARD_SIZE, Piece, PuzzleState
from frontend.cli.input_handler import DIRECTION_KEYS, get_key

console = Console()

_PIECES: dict[Piece, tuple[str, str]] = {
    Piece.BLOCK: ("#", "bold white"),
    Piece.RED_SHOE: ("R", "bold red"),
    Piece.BLUE_SHOE: ("B", "bold blue"),
    Piece.BLACK_SHOE: ("K", "bold bright_black"),
}


# -- board rendering ----------------------------------------------------------


def _render_board(puzzle: PuzzleState) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(BOARD_SIZE):
        table.add_column(width=len(Piece), justify="center")

    for r in range(BOARD_SIZE):
        cells: list[Text] = []
        for c in range(BOARD_SIZE):
            cell = Text()
            for piece in Piece:
                if puzzle.get_position(piece) == Position(r, c):
                    symbol, style = _PIECES[piece]
                    cell.append(symbol, style=style)
            cells.append(cell if cell.plain else Text("·", style="dim"))
        table.add_row(*cells)

    return table


def _legend() -> Text:
    legend = Text()
    for piece in Piece:
        symbol, style = _PIECES[piece]
        legend.append(f"  {symbol}", style=style)
        legend.append(f" {piece.name.lower().replace('_', ' ')}", style="dim")
    return legend


def _stats_table(stats: SearchStats) -> Table:
    table = Table(box=rich.box.SIMPLE, show_header=False)
    table.add_column(style="dim")
    table.add_column(justify="right", style="bold yellow")
    table.add_row("expanded", str(stats.expanded))
    table.add_row("generated", str(stats.generated))
    table.add_row("duplicates", str(stats.duplicates))
    table.add_row("max frontier", str(stats.max_frontier))
    return table


# -- solution trace -----------------------------------------------------------


def print_solution(puzzle: PuzzleState, show_stats: bool = False) -> bool:
    """Print a shortest solution with the final board.

    Returns True if a solution was found.
    """
    engine = BreadthFirstSearch()
    goal = engine.search(puzzle)

    if goal is None:
        console.print("[red]No solution found[/red]")
    else:
        for node in engine.path_to(goal):
            line = Text()
            if node.direction is not None:
                line.append(f"{node.direction.name} ", style="bold cyan")
            line.append(str(node.state))
            console.print(line)
        console.print(
            Panel(
                Group(Align.center(_render_board(goal.state)), _legend()),
                title=f"[bold green]Solved in {goal.depth} moves[/bold green]",
                border_style="green",
                expand=False,
            )
        )

    if show_stats:
        console.print(_stats_table(engine.stats))
    return goal is not None


# -- solver helpers -----------------------------------------------------------


def _apply_hint(game: GamePlay) -> str:
    hint = Solver.hint(game.puzzle)
    if hint is None:
        if game.is_won:
            return "[green]Already solved![/green]"
        return "[yellow]No solution from here. Undo or restart.[/yellow]"
    game.move(hint)
    return f"[cyan]Hint:[/cyan] moved [bold]{hint.name}[/bold]"


def _auto_solve(game: GamePlay) -> str:
    moves = Solver.solve(game.puzzle)
    if not moves:
        if game.is_won:
            return "[green]Already solved![/green]"
        return "[red]No solution from here.[/red]"

    for i, direction in enumerate(moves):
        game.move(direction)
        console.clear()

        progress = Text()
        progress.append(f"  Solving… move {i + 1}/{len(moves)} ", style="bold cyan")
        progress.append(f"({direction.name})", style="dim")

        panel = Panel(
            Align.center(_render_board(game.puzzle)),
            title="[bold cyan]Auto-Solve[/bold cyan]",
            border_style="cyan",
            padding=(1, 2),
        )
        console.print()
        console.print(Align.center(panel))
        console.print(Align.center(progress))
        time.sleep(0.3)

    return f"[bold green]Solved in {len(moves)} moves![/bold green]"


# -- game screen --------------------------------------------------------------


def _draw_game(game: GamePlay, status: str = "") -> None:
    console.clear()

    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.state.moves), style="bold yellow")
    stats.append("    Legal: ", style="dim")
    legal = [d.name for d in Direction if d in game.legal_moves]
    stats.append(", ".join(legal) or "-", style="bold yellow")

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  move   ", style="dim")
    for key, label in (("U", "undo"), ("N", "hint"), ("V", "solve"), ("R", "restart"), ("Q", "quit")):
        controls.append(key, style="bold cyan")
        controls.append(f"  {label}   ", style="dim")

    title = "[bold green]Solved![/bold green]" if game.is_won else "[bold cyan]Shoe Puzzle[/bold cyan]"
    panel = Panel(
        Group(Align.center(_render_board(game.puzzle)), Text(""), _legend()),
        title=title,
        border_style="green" if game.is_won else "bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(stats))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


# -- game loop ----------------------------------------------------------------


def run(puzzle: PuzzleState) -> None:
    """Play *puzzle* interactively until the player quits."""
    game = GamePlay.from_state(puzzle)
    status = ""

    while True:
        _draw_game(game, status)
        status = ""
        key = get_key()

        if key in DIRECTION_KEYS:
            if game.is_won:
                continue
            if not game.move(DIRECTION_KEYS[key]):
                status = f"[yellow]Cannot move {DIRECTION_KEYS[key].name}.[/yellow]"
        elif key == "undo":
            if not game.undo():
                status = "[dim]Nothing to undo.[/dim]"
        elif key == "hint":
            status = _apply_hint(game)
        elif key == "solve":
            status = _auto_solve(game)
        elif key == "restart":
            game.restart()
        elif key == "quit":
            console.clear()
            console.print("  Goodbye!\n")
            return
