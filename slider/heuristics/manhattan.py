from typing import Tuple

State = Tuple[int, ...]

def goal_cell(tile: int, n: int) -> Tuple[int, int]:
    """(row, col) of `tile` in the solved n×n layout (blank last)."""
    return divmod(tile - 1, n)

def manhattan(s: State, n: int) -> int:
    dist = 0
    for idx, tile in enumerate(s):
        if tile == 0:
            continue
        r, c = divmod(idx, n)
        gr, gc = goal_cell(tile, n)
        dist += abs(r - gr) + abs(c - gc)
    return dist

def hamming(s: State) -> int:
    """Number of non-blank tiles out of place."""
    return sum(1 for idx, tile in enumerate(s) if tile != 0 and tile != idx + 1)
