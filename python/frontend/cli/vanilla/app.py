"""Vanilla terminal frontend — no third-party dependencies.

Prints each solution in the plain text format::

    Minimum number of moves = 4
    3
     0  1  3
     4  2  5
     7  8  6
    ...

or ``No solution possible`` for an unsolvable board.
"""

from __future__ import annotations

from collections.abc import Iterable

from backend.engine.search import Solver
from backend.models.board import Board

NO_SOLUTION = "No solution possible"


def render(solver: Solver) -> str:
    """Return the printable result of *solver*."""
    solution = solver.solution()
    if solution is None:
        return NO_SOLUTION + "\n"

    lines = [f"Minimum number of moves = {solver.moves()}"]
    lines.extend(str(board) for board in solution)
    return "\n".join(lines)


def run(boards: Iterable[tuple[str, Board]], *, prune_visited: bool = True) -> None:
    """Solve and print every ``(name, board)`` pair."""
    entries = list(boards)
    for name, board in entries:
        if len(entries) > 1:
            print(f"== {name} ==")
        solver = Solver(board, prune_visited=prune_visited)
        print(render(solver))
