"""A* sliding puzzle solver with twin-board solvability detection."""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass, field
from enum import Enum

from backend.models.board import Board, Direction

logger = logging.getLogger(__name__)


class Lineage(Enum):
    """Which root a search node descends from."""

    ORIGINAL = "original"
    TWIN = "twin"


@dataclass(frozen=True, eq=False)
class SearchNode:
    """One point of the search tree: a board plus how it was reached."""

    board: Board
    moves: int
    lineage: Lineage
    parent: SearchNode | None = field(default=None, repr=False)
    priority: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "priority", self.board.manhattan() + self.moves)

    def child(self, board: Board) -> SearchNode:
        return SearchNode(board, self.moves + 1, self.lineage, parent=self)

    def path(self) -> list[Board]:
        """Boards from the lineage root to this node, root first."""
        boards: list[Board] = []
        node: SearchNode | None = self
        while node is not None:
            boards.append(node.board)
            node = node.parent
        boards.reverse()
        return boards


class Solver:
    """Finds a shortest solution of *initial*, or proves there is none.

    The initial board and its twin are searched side by side in one
    priority queue ordered by ``manhattan + moves``. Exactly one of them
    can reach the goal, so whichever lineage gets there first decides
    solvability. Equal priorities are served in insertion order.

    With *prune_visited* a board already expanded within the same lineage
    is not expanded again; Manhattan distance is consistent, so the move
    count stays minimal either way.
    """

    def __init__(self, initial: Board | None, *, prune_visited: bool = True) -> None:
        if initial is None:
            raise ValueError("Solver needs an initial board.")

        self.initial = initial
        self.prune_visited = prune_visited
        self.expanded = 0
        self.enqueued = 0

        goal = self._search(initial)
        path = goal.path()

        self._solvable = goal.lineage is Lineage.ORIGINAL
        self._solution: tuple[Board, ...] | None = (
            tuple(path) if self._solvable else None
        )
        self._moves = len(path) - 1 if self._solvable else -1

        logger.info(
            "Solved %d×%d board: solvable=%s moves=%d expanded=%d enqueued=%d",
            initial.size,
            initial.size,
            self._solvable,
            self._moves,
            self.expanded,
            self.enqueued,
        )

    # -- search ---------------------------------------------------------------

    def _search(self, initial: Board) -> SearchNode:
        frontier: list[tuple[int, int, SearchNode]] = []
        counter = itertools.count()
        closed: dict[Lineage, set[Board]] = {lineage: set() for lineage in Lineage}

        def push(node: SearchNode) -> None:
            heapq.heappush(frontier, (node.priority, next(counter), node))
            self.enqueued += 1

        push(SearchNode(initial, 0, Lineage.ORIGINAL))
        push(SearchNode(initial.twin(), 0, Lineage.TWIN))

        while True:
            _, _, node = heapq.heappop(frontier)
            if node.board.is_goal():
                logger.debug(
                    "Goal reached by %s lineage at depth %d",
                    node.lineage.value,
                    node.moves,
                )
                return node

            if self.prune_visited:
                seen = closed[node.lineage]
                if node.board in seen:
                    continue
                seen.add(node.board)

            self.expanded += 1
            if self.expanded % 10_000 == 0:
                logger.debug(
                    "Expanded %d nodes, frontier holds %d, priority %d",
                    self.expanded,
                    len(frontier),
                    node.priority,
                )

            previous = node.parent.board if node.parent is not None else None
            for neighbor in node.board.neighbors():
                if neighbor == previous:
                    continue
                push(node.child(neighbor))

    # -- results --------------------------------------------------------------

    def is_solvable(self) -> bool:
        return self._solvable

    def moves(self) -> int:
        """Minimum number of moves, or ``-1`` if unsolvable."""
        return self._moves

    def solution(self) -> tuple[Board, ...] | None:
        """Boards from the initial one to the goal, or ``None`` if unsolvable."""
        return self._solution

    def directions(self) -> list[Direction] | None:
        """Tile slides that replay :meth:`solution`, or ``None`` if unsolvable."""
        if self._solution is None:
            return None
        steps: list[Direction] = []
        for before, after in itertools.pairwise(self._solution):
            direction = before.direction_to(after)
            if direction is None:
                raise RuntimeError("Solution contains a non-adjacent board pair.")
            steps.append(direction)
        return steps
