"""Generator and replay tests, including solvability along neighbor steps."""

from __future__ import annotations

import random

import pytest

from backend.engine.generator import BoardGenerator
from backend.engine.replay import Replay
from backend.engine.search import Solver
from backend.models.board import Board, Direction


# -- generator ----------------------------------------------------------------


def test_solved_board() -> None:
    assert BoardGenerator.solved(3) == Board.goal(3)


def test_zero_steps_returns_goal() -> None:
    assert BoardGenerator.scramble(3, 0).is_goal()


def test_seeded_scramble_is_reproducible() -> None:
    a = BoardGenerator.scramble(4, 25, random.Random(7))
    b = BoardGenerator.scramble(4, 25, random.Random(7))

    assert a == b


@pytest.mark.parametrize(("size", "steps"), [(1, 3), (3, -1)])
def test_scramble_rejects_bad_arguments(size: int, steps: int) -> None:
    with pytest.raises(ValueError):
        BoardGenerator.scramble(size, steps)


@pytest.mark.parametrize("seed", range(10))
def test_unsolvable_boards_are_detected(seed: int) -> None:
    board = BoardGenerator.unsolvable(3, 8, random.Random(seed))

    assert not Solver(board).is_solvable()


# -- solvability along neighbor steps -----------------------------------------


@pytest.mark.parametrize("size", [2, 3])
@pytest.mark.parametrize("seed", range(8))
def test_neighbors_of_solvable_boards_stay_solvable(size: int, seed: int) -> None:
    board = BoardGenerator.scramble(size, 10, random.Random(seed))

    solver = Solver(board)
    assert solver.is_solvable()
    assert solver.moves() <= 10

    for neighbor in board.neighbors():
        assert Solver(neighbor).is_solvable()


# -- replay -------------------------------------------------------------------


def test_replay_tracks_history() -> None:
    start = Board([[1, 2, 3], [4, 5, 6], [0, 7, 8]])
    replay = Replay(start)

    assert replay.move(Direction.LEFT)
    assert replay.move(Direction.LEFT)
    assert replay.moves == 2
    assert replay.is_won
    assert replay.history[0] == start


def test_replay_rejects_illegal_move() -> None:
    replay = Replay(Board.goal(3))

    assert not replay.move(Direction.UP)
    assert replay.moves == 0
    assert replay.board == Board.goal(3)


def test_replay_play_stops_on_invalid_move() -> None:
    replay = Replay(Board.goal(2))

    assert not replay.play([Direction.DOWN, Direction.DOWN])
    assert replay.moves == 1
