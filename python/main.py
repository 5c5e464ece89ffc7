#!/usr/bin/env python3
"""Shoe Puzzle.

Usage::

    python main.py                              # solve the original puzzle
    python main.py solve -f rich --stats        # Rich output with search counters
    python main.py solve --state "1,1 2,0 1,1 0,2"
    python main.py solve --random --seed 7      # solve a scrambled start
    python main.py play                         # play it yourself
"""

import importlib
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.common.logging import get_logger  # noqa: E402
from backend.engine.gamegenerator import GameGenerator  # noqa: E402
from backend.engine.gamegenerator.generator import DEFAULT_SCRAMBLE_STEPS  # noqa: E402
from backend.models import InvalidConfiguration, PuzzleState  # noqa: E402


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


class LogLevel(StrEnum):
    debug = "DEBUG"
    info = "INFO"
    warning = "WARNING"
    error = "ERROR"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _parse_state(value: Optional[str]) -> Optional[PuzzleState]:
    if value is None:
        return None
    try:
        return PuzzleState.parse(value)
    except InvalidConfiguration as e:
        raise typer.BadParameter(str(e)) from e


def _starting_state(
    state: Optional[PuzzleState], random_start: bool, seed: Optional[int], steps: int
) -> PuzzleState:
    if state is not None:
        return state
    if random_start:
        return GameGenerator.generate(steps=steps, seed=seed)
    return GameGenerator.initial()


def _solve(
    frontend: Frontend = Frontend.vanilla,
    state: Optional[PuzzleState] = None,
    random_start: bool = False,
    seed: Optional[int] = None,
    steps: int = DEFAULT_SCRAMBLE_STEPS,
    stats: bool = False,
) -> None:
    puzzle = _starting_state(state, random_start, seed, steps)
    mod = importlib.import_module(_RUNNERS[frontend])
    if not mod.print_solution(puzzle, show_stats=stats):
        raise typer.Exit(code=1)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)

_STATE_HELP = 'Starting layout as four "row,col" pairs: block, red, blue, black shoe.'


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    log_level: LogLevel = typer.Option(
        LogLevel.warning, "--log-level",
        case_sensitive=False,
        help="Logging level.",
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file",
        help="Also write log records to this file.",
    ),
    # Without a command the solve options apply directly.
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="Frontend used to print the solution.",
    ),
    state: Optional[str] = typer.Option(
        None, "--state",
        callback=_parse_state,
        help=_STATE_HELP,
    ),
    random_start: bool = typer.Option(
        False, "--random",
        help="Solve a random start reachable from the original layout.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for --random.",
    ),
    steps: int = typer.Option(
        DEFAULT_SCRAMBLE_STEPS, "--steps",
        min=0,
        help="Number of random moves used by --random.",
    ),
    stats: bool = typer.Option(
        False, "--stats",
        help="Show search counters.",
    ),
) -> None:
    """Shoe Puzzle: find the shortest way to pair the red and the blue shoe."""
    get_logger("backend", log_file=log_file, level=log_level.value)
    if ctx.invoked_subcommand is None:
        _solve(frontend, state, random_start, seed, steps, stats)


@app.command()
def solve(
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="Frontend used to print the solution.",
    ),
    state: Optional[str] = typer.Option(
        None, "--state",
        callback=_parse_state,
        help=_STATE_HELP,
    ),
    random_start: bool = typer.Option(
        False, "--random",
        help="Solve a random start reachable from the original layout.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for --random.",
    ),
    steps: int = typer.Option(
        DEFAULT_SCRAMBLE_STEPS, "--steps",
        min=0,
        help="Number of random moves used by --random.",
    ),
    stats: bool = typer.Option(
        False, "--stats",
        help="Show search counters.",
    ),
) -> None:
    """Print a shortest solution."""
    _solve(frontend, state, random_start, seed, steps, stats)


@app.command()
def play(
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="Frontend to play in.",
    ),
    state: Optional[str] = typer.Option(
        None, "--state",
        callback=_parse_state,
        help=_STATE_HELP,
    ),
    random_start: bool = typer.Option(
        False, "--random",
        help="Start from a random layout reachable from the original one.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for --random.",
    ),
) -> None:
    """Play the puzzle interactively."""
    puzzle = _starting_state(state, random_start, seed, DEFAULT_SCRAMBLE_STEPS)
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(puzzle)


if __name__ == "__main__":
    app()
