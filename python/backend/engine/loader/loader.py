"""Reads puzzle boards from text.

The format is the dimension ``N`` followed by ``N²`` integers in row-major
order, separated by any whitespace::

    3
     0  1  3
     4  2  5
     7  8  6

The loader is the only place where a board is validated. The solver
assumes a proper permutation of ``0..N²-1`` and may never finish otherwise.
"""

from __future__ import annotations

import logging
from pathlib import Path

from backend.models.board import Board

logger = logging.getLogger(__name__)


class BoardFormatError(ValueError):
    """Raised when puzzle text does not describe a valid board."""


class BoardLoader:
    """Parses and validates boards from strings or files."""

    @staticmethod
    def parse(text: str) -> Board:
        tokens = text.split()
        if not tokens:
            raise BoardFormatError("Board text is empty.")

        try:
            values = [int(tok) for tok in tokens]
        except ValueError as exc:
            raise BoardFormatError(f"Board text must contain only integers: {exc}") from exc

        size, tiles = values[0], values[1:]
        if size < 2:
            raise BoardFormatError(f"Board dimension must be at least 2, got {size}.")
        if len(tiles) != size * size:
            raise BoardFormatError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(tiles)}."
            )
        if sorted(tiles) != list(range(size * size)):
            missing = sorted(set(range(size * size)) - set(tiles))
            raise BoardFormatError(
                f"Tiles must be a permutation of 0..{size * size - 1}; "
                f"missing {missing}."
            )

        return Board.from_flat(size, tiles)

    @staticmethod
    def load(path: Path) -> Board:
        """Read a board from *path*; raises ``FileNotFoundError`` if absent."""
        path = Path(path)
        board = BoardLoader.parse(path.read_text())
        logger.debug("Loaded %d×%d board from %s", board.size, board.size, path)
        return board

    @staticmethod
    def dumps(board: Board) -> str:
        """Serialise *board* in the same format :meth:`parse` reads."""
        return str(board)
