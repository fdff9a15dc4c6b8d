"""Board model for the N-puzzle solver."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum


class Direction(StrEnum):
    """Direction in which a *tile* slides into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# Offset from the blank to the tile that slides.
# UP   -> tile at (br+1, bc) moves up   -> blank shifts down
# DOWN -> tile at (br-1, bc) moves down -> blank shifts up
# LEFT -> tile at (br, bc+1) moves left -> blank shifts right
# RIGHT-> tile at (br, bc-1) moves right-> blank shifts left
_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}

# Blank moves down, right, left, up.
_NEIGHBOR_ORDER = (Direction.UP, Direction.LEFT, Direction.RIGHT, Direction.DOWN)


@dataclass(frozen=True)
class Board:
    """Immutable N×N arrangement of tiles. 0 represents the blank.

    The grid is copied on construction, so later changes to the caller's
    lists never leak in. The tiles are expected to be a permutation of
    ``0..N²-1``; this is not checked here (see ``BoardLoader``).
    """

    tiles: tuple[tuple[int, ...], ...]

    def __init__(self, tiles: Sequence[Sequence[int]]) -> None:
        object.__setattr__(self, "tiles", tuple(tuple(row) for row in tiles))

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: Sequence[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if len(flat) != size * size:
            raise ValueError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        return cls([flat[r * size : (r + 1) * size] for r in range(size)])

    @classmethod
    def goal(cls, size: int) -> Board:
        """Return the solved board (tiles in order, blank bottom-right)."""
        return cls.from_flat(size, [*range(1, size * size), 0])

    # -- queries --------------------------------------------------------------

    @property
    def size(self) -> int:
        return len(self.tiles)

    def dimension(self) -> int:
        return self.size

    @property
    def blank_pos(self) -> tuple[int, int]:
        for r, row in enumerate(self.tiles):
            for c, v in enumerate(row):
                if v == 0:
                    return r, c
        raise ValueError("Board has no blank tile.")

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row][col]

    def flat(self) -> tuple[int, ...]:
        return tuple(v for row in self.tiles for v in row)

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.tiles[row][col]
        if val == 0:
            return row == self.size - 1 and col == self.size - 1
        return divmod(val - 1, self.size) == (row, col)

    # -- heuristics -----------------------------------------------------------

    def hamming(self) -> int:
        """Number of tiles out of place, blank excluded."""
        n = self.size
        count = 0
        for r, row in enumerate(self.tiles):
            for c, val in enumerate(row):
                if val != 0 and divmod(val - 1, n) != (r, c):
                    count += 1
        return count

    def manhattan(self) -> int:
        """Sum of the grid distances of every tile from its goal cell."""
        n = self.size
        total = 0
        for r, row in enumerate(self.tiles):
            for c, val in enumerate(row):
                if val == 0:
                    continue
                goal_r, goal_c = divmod(val - 1, n)
                total += abs(goal_r - r) + abs(goal_c - c)
        return total

    def is_goal(self) -> bool:
        return self.hamming() == 0

    # -- derived boards -------------------------------------------------------

    def twin(self) -> Board:
        """Swap the first two tiles of a row that holds no blank.

        Exactly one of a board and its twin can reach the goal.
        """
        row = 1 if self.blank_pos[0] == 0 else 0
        tiles = [list(r) for r in self.tiles]
        tiles[row][0], tiles[row][1] = tiles[row][1], tiles[row][0]
        return Board(tiles)

    def slide(self, direction: Direction) -> Board | None:
        """Return the board after sliding a tile in *direction*.

        ``None`` when no tile sits on that side of the blank.
        """
        br, bc = self.blank_pos
        dr, dc = _OFFSETS[direction]
        tr, tc = br + dr, bc + dc
        if not (0 <= tr < self.size and 0 <= tc < self.size):
            return None

        tiles = [list(r) for r in self.tiles]
        tiles[br][bc], tiles[tr][tc] = tiles[tr][tc], tiles[br][bc]
        return Board(tiles)

    def neighbors(self) -> list[Board]:
        """All boards one slide away (blank down, right, left, up)."""
        return [
            board
            for direction in _NEIGHBOR_ORDER
            if (board := self.slide(direction)) is not None
        ]

    def direction_to(self, other: Board) -> Direction | None:
        """Return the slide that turns this board into *other*, if any."""
        if other.size != self.size:
            return None
        for direction in _NEIGHBOR_ORDER:
            if self.slide(direction) == other:
                return direction
        return None

    # -- rendering ------------------------------------------------------------

    def __str__(self) -> str:
        lines = [str(self.size)]
        lines.extend("".join(f"{val:2d} " for val in row) for row in self.tiles)
        return "\n".join(lines) + "\n"
