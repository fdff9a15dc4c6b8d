#!/usr/bin/env python3
"""N-puzzle solver.

Usage::

    python main.py solve puzzle04.txt             # plain output
    python main.py solve -f rich --animate a.txt  # Rich terminal
    python main.py scramble -s 4 --steps 30       # print a random board
"""

import importlib
import logging
import random
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.generator import BoardGenerator  # noqa: E402
from backend.engine.loader import BoardFormatError, BoardLoader  # noqa: E402
from backend.models.board import Board  # noqa: E402

logger = logging.getLogger("npuzzle")


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


def _setup_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=level.value,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


def _load_all(files: list[Path]) -> list[tuple[str, Board]]:
    boards: list[tuple[str, Board]] = []
    for path in files:
        try:
            boards.append((path.name, BoardLoader.load(path)))
        except FileNotFoundError:
            typer.echo(f"Error: no such file: {path}", err=True)
            raise typer.Exit(code=1) from None
        except BoardFormatError as exc:
            typer.echo(f"Error: {path}: {exc}", err=True)
            raise typer.Exit(code=1) from exc
    return boards


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.callback()
def main(
    log_level: LogLevel = typer.Option(
        LogLevel.warning, "--log-level",
        envvar="NPUZZLE_LOG_LEVEL",
        case_sensitive=False,
        help="Logging verbosity.",
    ),
) -> None:
    """N-puzzle solver (A* with Manhattan distance)."""
    _setup_logging(log_level)


@app.command()
def solve(
    files: list[Path] = typer.Argument(
        ..., help="Puzzle files: dimension N followed by N² tiles (0 = blank).",
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="Output style.",
    ),
    prune: bool = typer.Option(
        True, "--prune/--no-prune",
        help="Skip boards already expanded in the same search lineage.",
    ),
    animate: bool = typer.Option(
        False, "--animate",
        help="Play the solution move by move (rich frontend only).",
    ),
) -> None:
    """Solve each puzzle file and print the shortest solution."""
    boards = _load_all(files)
    logger.debug("Loaded %d board(s)", len(boards))

    mod = importlib.import_module(_RUNNERS[frontend])
    if frontend is Frontend.rich:
        mod.run(boards, prune_visited=prune, animate=animate)
    else:
        mod.run(boards, prune_visited=prune)


@app.command()
def scramble(
    size: int = typer.Option(
        3, "-s", "--size",
        min=2, max=6,
        help="Grid size (2-6).",
    ),
    steps: int = typer.Option(
        20, "--steps",
        min=0,
        help="Random slides applied to the solved board.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for reproducible boards.",
    ),
    unsolvable: bool = typer.Option(
        False, "--unsolvable",
        help="Emit a board that cannot be solved.",
    ),
) -> None:
    """Print a random board in the puzzle file format."""
    rng = random.Random(seed)
    if unsolvable:
        board = BoardGenerator.unsolvable(size, steps, rng)
    else:
        board = BoardGenerator.scramble(size, steps, rng)
    typer.echo(BoardLoader.dumps(board), nl=False)


if __name__ == "__main__":
    app()
