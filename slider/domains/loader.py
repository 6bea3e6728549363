from pathlib import Path
from typing import Union

from slider.domains.board import Board


class MalformedBoardError(ValueError):
    """Board file could not be parsed into a valid square layout."""


def parse_board(text: str) -> Board:
    """Parse `n` followed by n*n row-major tile labels (0 = blank)."""
    tokens = text.split()
    if not tokens:
        raise MalformedBoardError("empty board description")
    try:
        values = [int(t) for t in tokens]
    except ValueError as e:
        raise MalformedBoardError(f"non-integer token in board description: {e}") from e
    n, tiles = values[0], values[1:]
    if n < 2:
        raise MalformedBoardError(f"board dimension must be at least 2, got {n}")
    if len(tiles) != n * n:
        raise MalformedBoardError(f"expected {n * n} tiles after dimension {n}, got {len(tiles)}")
    try:
        return Board(tiles, n)
    except ValueError as e:
        raise MalformedBoardError(str(e)) from e


def load_board(path: Union[str, Path]) -> Board:
    return parse_board(Path(path).read_text())
