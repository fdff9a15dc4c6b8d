"""Generates puzzle boards for tests and the command line."""

from __future__ import annotations

import logging
import random

from backend.models.board import Board

logger = logging.getLogger(__name__)


class BoardGenerator:
    """Creates boards by walking the blank away from the solved state."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board.goal(size)

    @staticmethod
    def scramble(size: int, steps: int, rng: random.Random | None = None) -> Board:
        """Return a *solvable* board ``steps`` random slides from the goal.

        The walk never immediately undoes its previous slide, so for small
        step counts the result is usually ``steps`` moves away.
        """
        if size < 2:
            raise ValueError(f"Board size must be at least 2, got {size}.")
        if steps < 0:
            raise ValueError(f"Step count must not be negative, got {steps}.")

        rng = rng or random.Random()
        board = Board.goal(size)
        previous: Board | None = None

        for _ in range(steps):
            neighbors = board.neighbors()
            if previous in neighbors and len(neighbors) > 1:
                neighbors.remove(previous)
            previous, board = board, rng.choice(neighbors)

        logger.debug("Scrambled %d×%d board with %d slides", size, size, steps)
        return board

    @staticmethod
    def unsolvable(size: int, steps: int, rng: random.Random | None = None) -> Board:
        """Return a board that can never reach the goal."""
        return BoardGenerator.scramble(size, steps, rng).twin()
