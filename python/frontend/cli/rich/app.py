"""Rich terminal frontend — tables, colours, and panels.

Shows the same content as the vanilla printer using the ``rich`` library,
and can animate the solution move by move.
"""

from __future__ import annotations

import time
from collections.abc import Iterable

import rich.box
from rich.align import Align
from rich.columns import Columns
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.replay import Replay
from backend.engine.search import Solver
from backend.models.board import Board

console = Console()


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _stats(solver: Solver) -> Text:
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(solver.moves()), style="bold yellow")
    stats.append("    Expanded: ", style="dim")
    stats.append(str(solver.expanded), style="bold yellow")
    stats.append("    Enqueued: ", style="dim")
    stats.append(str(solver.enqueued), style="bold yellow")
    return stats


# -- screens ------------------------------------------------------------------


def _draw_unsolvable(name: str, board: Board) -> None:
    panel = Panel(
        Group(
            Align.center(_render_board(board)),
            Align.center(Text("\nNo solution possible", style="bold red")),
        ),
        title=f"[bold red]{name}[/bold red]",
        border_style="red",
        padding=(1, 2),
    )
    console.print(panel)


def _draw_solution(name: str, solver: Solver) -> None:
    solution = solver.solution() or ()
    directions = solver.directions() or []

    labels = ["start", *(direction.value for direction in directions)]
    steps = Columns(
        [
            Group(_render_board(board), Align.center(Text(label, style="dim")))
            for board, label in zip(solution, labels)
        ],
        padding=(0, 2),
    )

    panel = Panel(
        Group(steps, Text(""), _stats(solver)),
        title=f"[bold green]{name}  {solver.initial.size}×{solver.initial.size}[/bold green]",
        border_style="green",
        padding=(1, 2),
    )
    console.print(panel)


def _animate(name: str, solver: Solver, delay: float) -> None:
    replay = Replay(solver.initial)
    directions = solver.directions() or []

    for i, direction in enumerate(directions):
        replay.move(direction)
        console.clear()

        progress = Text()
        progress.append(f"  Solving… move {i + 1}/{len(directions)} ", style="bold cyan")
        progress.append(f"({direction.value})", style="dim")

        panel = Panel(
            Align.center(_render_board(replay.board)),
            title=f"[bold cyan]{name}[/bold cyan]",
            border_style="cyan",
            padding=(1, 2),
        )
        console.print()
        console.print(Align.center(panel))
        console.print(Align.center(progress))
        time.sleep(delay)

    if replay.is_won:
        console.print(Align.center(Text(f"Solved in {replay.moves} moves!", style="bold green")))


# -- entry point --------------------------------------------------------------


def run(
    boards: Iterable[tuple[str, Board]],
    *,
    prune_visited: bool = True,
    animate: bool = False,
    delay: float = 0.3,
) -> None:
    """Solve and display every ``(name, board)`` pair."""
    for name, board in boards:
        with console.status(f"Solving {name}…"):
            solver = Solver(board, prune_visited=prune_visited)

        if not solver.is_solvable():
            _draw_unsolvable(name, board)
        elif animate:
            _animate(name, solver, delay)
        else:
            _draw_solution(name, solver)
