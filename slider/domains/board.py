from __future__ import annotations
from typing import Dict, Iterable, List, Sequence, Tuple
import random

from slider.heuristics.manhattan import hamming, manhattan

State = Tuple[int, ...]

# Blank-move offsets per n, cached: blank index -> indices it can swap with
_MOVES: Dict[int, Dict[int, Tuple[int, ...]]] = {}

def _moves(n: int) -> Dict[int, Tuple[int, ...]]:
    if n not in _MOVES:
        table = {}
        for i in range(n * n):
            r, c = divmod(i, n)
            moves = []
            if r > 0:       moves.append(i - n)
            if r < n - 1:   moves.append(i + n)
            if c > 0:       moves.append(i - 1)
            if c < n - 1:   moves.append(i + 1)
            table[i] = tuple(moves)
        _MOVES[n] = table
    return _MOVES[n]

def _swap(s: State, i: int, j: int) -> State:
    lst = list(s)
    lst[i], lst[j] = lst[j], lst[i]
    return tuple(lst)


class Board:
    """Immutable n×n sliding-tile layout (0 is the blank).

    The solved layout holds 1..n*n-1 in row-major order with the blank last.
    """
    __slots__ = ("_n", "_tiles", "_blank", "_h")

    def __init__(self, tiles: Iterable[int], n: int):
        s = tuple(tiles)
        if n < 2:
            raise ValueError(f"board dimension must be at least 2, got {n}")
        if len(s) != n * n:
            raise ValueError(f"expected {n * n} tiles for a {n}x{n} board, got {len(s)}")
        if sorted(s) != list(range(n * n)):
            raise ValueError(f"tiles must be a permutation of 0..{n * n - 1}")
        self._n = n
        self._tiles = s
        self._blank = s.index(0)
        self._h = None

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Board":
        n = len(rows)
        if any(len(row) != n for row in rows):
            raise ValueError("board must be square")
        return cls((t for row in rows for t in row), n)

    @classmethod
    def goal(cls, n: int) -> "Board":
        return cls(list(range(1, n * n)) + [0], n)

    @classmethod
    def scramble(cls, n: int, depth: int, seed: int) -> "Board":
        """Depth-limited random walk from the goal with no immediate backtrack."""
        rng = random.Random(seed)
        nei = _moves(n)
        s = cls.goal(n).tiles
        last_blank = None
        for _ in range(depth):
            z = s.index(0)
            cand = list(nei[z])
            if last_blank in cand and len(cand) > 1:
                cand.remove(last_blank)
            j = rng.choice(cand)
            s = _swap(s, z, j)
            last_blank = z
        return cls(s, n)

    @classmethod
    def _trusted(cls, s: State, n: int) -> "Board":
        # skips validation for layouts derived from an already valid board
        b = cls.__new__(cls)
        b._n = n
        b._tiles = s
        b._blank = s.index(0)
        b._h = None
        return b

    @property
    def n(self) -> int:
        return self._n

    @property
    def tiles(self) -> State:
        return self._tiles

    def rows(self) -> List[Tuple[int, ...]]:
        n = self._n
        return [self._tiles[r * n:(r + 1) * n] for r in range(n)]

    # ---------- Heuristics ----------
    def manhattan(self) -> int:
        # computed once, boards never change
        if self._h is None:
            self._h = manhattan(self._tiles, self._n)
        return self._h

    def hamming(self) -> int:
        return hamming(self._tiles)

    def is_goal(self) -> bool:
        return self.manhattan() == 0

    # ---------- Core dynamics ----------
    def neighbors(self) -> List["Board"]:
        """Boards one blank move away, in the order up, down, left, right."""
        z = self._blank
        return [Board._trusted(_swap(self._tiles, z, j), self._n) for j in _moves(self._n)[z]]

    def twin(self) -> "Board":
        """Swap the first two non-blank tiles (row-major); flips solvability."""
        s = self._tiles
        i = next(k for k, v in enumerate(s) if v != 0)
        j = next(k for k, v in enumerate(s[i + 1:], start=i + 1) if v != 0)
        return Board._trusted(_swap(s, i, j), self._n)

    def is_solvable(self) -> bool:
        """Solvability rules:
           - n odd: inversions must be even
           - n even: (inversions + blank_row_from_bottom) must be ODD
             (row count is 1-based from the bottom)
        """
        arr = [x for x in self._tiles if x != 0]
        inv = 0
        for i in range(len(arr)):
            for j in range(i + 1, len(arr)):
                if arr[i] > arr[j]:
                    inv += 1
        if self._n % 2 == 1:
            return (inv % 2) == 0
        blank_row_from_bottom = self._n - self._blank // self._n
        return ((inv + blank_row_from_bottom) % 2) == 1

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._n == other._n and self._tiles == other._tiles

    def __hash__(self) -> int:
        return hash((self._n, self._tiles))

    def __repr__(self) -> str:
        return f"Board({self._tiles!r}, n={self._n})"

    def __str__(self) -> str:
        width = len(str(self._n * self._n - 1))
        lines = [str(self._n)]
        for row in self.rows():
            lines.append(" ".join(f"{t:>{width}}" for t in row))
        return "\n".join(lines)
