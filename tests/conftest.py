import pytest

from slider.domains.board import Board


@pytest.fixture
def goal3():
    return Board.goal(3)


@pytest.fixture
def example3():
    """The 8 1 3 / 4 _ 2 / 7 6 5 layout from the board API walkthrough."""
    return Board.from_rows([[8, 1, 3], [4, 0, 2], [7, 6, 5]])


@pytest.fixture
def four_moves():
    return Board.from_rows([[0, 1, 3], [4, 2, 5], [7, 8, 6]])
