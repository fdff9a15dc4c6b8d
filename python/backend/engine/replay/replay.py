"""Replays tile slides on a board and keeps every position visited."""

from __future__ import annotations

from backend.models.board import Board, Direction


class Replay:
    """Walks a board through a sequence of slides.

    Boards are immutable, so each accepted move appends a new board to
    :attr:`history`; the initial board stays first.
    """

    def __init__(self, board: Board) -> None:
        self.history: list[Board] = [board]

    # -- movement (direction = where the *tile* moves) ------------------------

    def move(self, direction: Direction) -> bool:
        """Slide a tile in *direction* into the adjacent blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Returns True if the move was valid; an invalid move changes nothing.
        """
        board = self.board.slide(direction)
        if board is None:
            return False
        self.history.append(board)
        return True

    def play(self, directions: list[Direction]) -> bool:
        """Apply every move in order; stop at the first invalid one."""
        return all(self.move(direction) for direction in directions)

    # -- queries --------------------------------------------------------------

    @property
    def board(self) -> Board:
        return self.history[-1]

    @property
    def moves(self) -> int:
        return len(self.history) - 1

    @property
    def is_won(self) -> bool:
        return self.board.is_goal()
