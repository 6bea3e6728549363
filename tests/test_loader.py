import pytest

from slider.domains.board import Board
from slider.domains.loader import MalformedBoardError, load_board, parse_board


def test_parse_board():
    b = parse_board("3\n 8  1  3\n 4  0  2\n 7  6  5\n")
    assert b == Board.from_rows([[8, 1, 3], [4, 0, 2], [7, 6, 5]])


def test_load_board_from_file(tmp_path):
    p = tmp_path / "puzzle04.txt"
    p.write_text("3\n0 1 3\n4 2 5\n7 8 6\n")
    assert load_board(p).tiles == (0, 1, 3, 4, 2, 5, 7, 8, 6)
    assert load_board(str(p)).n == 3


@pytest.mark.parametrize("text", [
    "",
    "3\n1 2 x\n",
    "2\n1 2 3\n",
    "2\n1 2 3 0 4\n",
    "2\n1 1 3 0\n",
    "1\n0\n",
])
def test_malformed(text):
    with pytest.raises(MalformedBoardError):
        parse_board(text)


def test_malformed_is_a_value_error():
    with pytest.raises(ValueError):
        parse_board("two\n")
