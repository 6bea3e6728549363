from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional

from slider.domains.board import Board


@dataclass(frozen=True, eq=False)
class SearchNode:
    """A board plus A* bookkeeping.

    `twin` marks nodes whose root is the twin board; it is fixed at the root
    and copied unchanged to every descendant.
    """
    board: Board
    g: int
    h: int
    twin: bool = False
    parent: Optional["SearchNode"] = None

    @classmethod
    def root(cls, board: Board, twin: bool = False) -> "SearchNode":
        return cls(board=board, g=0, h=board.manhattan(), twin=twin)

    def child(self, board: Board) -> "SearchNode":
        return SearchNode(board=board, g=self.g + 1, h=board.manhattan(),
                          twin=self.twin, parent=self)

    @property
    def priority(self) -> int:
        return self.g + self.h


def reconstruct_path(node: Optional[SearchNode]) -> List[Board]:
    path: List[Board] = []
    while node is not None:
        path.append(node.board)
        node = node.parent
    path.reverse()
    return path
