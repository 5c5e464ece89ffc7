"""Command-line tests, run through typer's test runner."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
from typer.testing import CliRunner

from main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _reset_backend_logger() -> Iterator[None]:
    yield
    logger = logging.getLogger("backend")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def test_default_solves_original_puzzle() -> None:
    result = runner.invoke(app, [])
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[0] == "[(0,0),(2,0),(1,1),(0,2)]"
    assert all(line.split(" ", 1)[0] in {"UP", "RIGHT", "DOWN", "LEFT"} for line in lines[1:])


def test_solve_trace() -> None:
    result = runner.invoke(app, ["solve", "--state", "0,0 0,0 1,0 2,2"])
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [
        "[(0,0),(0,0),(1,0),(2,2)]",
        "DOWN [(1,0),(1,0),(1,0),(2,2)]",
    ]


def test_solve_accepts_rendered_state() -> None:
    result = runner.invoke(app, ["solve", "--state", "[(1,1),(1,1),(1,1),(1,2)]"])
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["[(1,1),(1,1),(1,1),(1,2)]"]


def test_solve_without_solution() -> None:
    result = runner.invoke(app, ["solve", "--state", "0,0 1,0 0,1 0,0"])
    assert result.exit_code == 1
    assert "No solution found" in result.output


def test_solve_rejects_invalid_state() -> None:
    result = runner.invoke(app, ["solve", "--state", "1,1 1,1 1,1 1,1"])
    assert result.exit_code == 2


def test_solve_stats() -> None:
    result = runner.invoke(app, ["solve", "--state", "0,0 0,0 1,0 2,2", "--stats"])
    assert result.exit_code == 0, result.output
    assert result.output.splitlines()[-1] == (
        "expanded=2 generated=5 duplicates=1 max_frontier=3"
    )


def test_solve_random_start() -> None:
    result = runner.invoke(app, ["solve", "--random", "--seed", "5"])
    assert result.exit_code in (0, 1), result.output
    assert result.output.strip()


def test_rich_frontend() -> None:
    result = runner.invoke(app, ["solve", "-f", "rich", "--state", "0,0 0,0 1,0 2,2", "--stats"])
    assert result.exit_code == 0, result.output
    assert "DOWN [(1,0),(1,0),(1,0),(2,2)]" in result.output
    assert "Solved in 1 moves" in result.output
    assert "expanded" in result.output


def test_log_file(tmp_path) -> None:
    log_file = tmp_path / "logs" / "solve.log"
    result = runner.invoke(
        app,
        ["--log-level", "debug", "--log-file", str(log_file), "solve", "--state", "0,0 0,0 1,0 2,2"],
    )
    assert result.exit_code == 0, result.output
    assert "Goal [(1,0),(1,0),(1,0),(2,2)] found at depth 1" in log_file.read_text()


def test_solve_options_without_command() -> None:
    result = runner.invoke(app, ["--state", "0,0 0,0 1,0 2,2"])
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [
        "[(0,0),(0,0),(1,0),(2,2)]",
        "DOWN [(1,0),(1,0),(1,0),(2,2)]",
    ]


def test_frontend_and_stats_without_command() -> None:
    result = runner.invoke(app, ["-f", "rich", "--state", "0,0 0,0 1,0 2,2", "--stats"])
    assert result.exit_code == 0, result.output
    assert "DOWN [(1,0),(1,0),(1,0),(2,2)]" in result.output
    assert "expanded" in result.output


def test_exit_codes_without_command() -> None:
    assert runner.invoke(app, ["--state", "0,0 1,0 0,1 0,0"]).exit_code == 1
    assert runner.invoke(app, ["--state", "1,1 1,1 1,1 1,1"]).exit_code == 2
    assert runner.invoke(app, ["--random", "--seed", "5"]).exit_code in (0, 1)
