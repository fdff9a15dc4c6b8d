"""Board loader tests for parsing and validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from backend.engine.loader import BoardFormatError, BoardLoader
from backend.models.board import Board

PUZZLES_DIR = Path(__file__).resolve().parent.parent.parent / "fixtures" / "puzzles"


def test_parse_row_major_text() -> None:
    board = BoardLoader.parse("3\n 0 1 3\n 4 2 5\n 7 8 6\n")

    assert board == Board([[0, 1, 3], [4, 2, 5], [7, 8, 6]])


def test_parse_accepts_any_whitespace() -> None:
    assert BoardLoader.parse("2 1 2\t3\n\n0") == Board.goal(2)


def test_load_fixture_file() -> None:
    board = BoardLoader.load(PUZZLES_DIR / "puzzle4x4-10.txt")

    assert board.size == 4
    assert board.manhattan() == 10


def test_dumps_round_trips_through_parse() -> None:
    board = BoardLoader.load(PUZZLES_DIR / "puzzle04.txt")

    assert BoardLoader.parse(BoardLoader.dumps(board)) == board


def test_missing_file_raises() -> None:
    with pytest.raises(FileNotFoundError):
        BoardLoader.load(PUZZLES_DIR / "does-not-exist.txt")


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("", "empty"),
        ("3 1 2 x 4 5 6 7 8 0", "only integers"),
        ("1 0", "at least 2"),
        ("3 1 2 3 4 5 6 7 8", "Expected 9 tiles"),
        ("3 1 2 3 4 5 6 7 8 0 9", "Expected 9 tiles"),
        ("3 1 1 3 4 5 6 7 8 0", r"missing \[2\]"),
        ("2 1 2 3 4", r"missing \[0\]"),
    ],
    ids=["empty", "non-integer", "too-small", "short", "long", "duplicate", "out-of-range"],
)
def test_invalid_text_is_rejected(text: str, message: str) -> None:
    with pytest.raises(BoardFormatError, match=message):
        BoardLoader.parse(text)


def test_format_error_is_a_value_error(tmp_path: Path) -> None:
    path = tmp_path / "bad.txt"
    path.write_text("2\n1 1\n2 3\n")

    with pytest.raises(ValueError):
        BoardLoader.load(path)
