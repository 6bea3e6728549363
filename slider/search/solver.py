from __future__ import annotations
from typing import List, Optional
from time import perf_counter
import logging

from slider.domains.board import Board
from slider.search.errors import EmptyQueueError, InvalidArgumentError
from slider.search.node import SearchNode, reconstruct_path
from slider.search.queue import MinPQ, NodeOrder

logger = logging.getLogger(__name__)


def successors(node: SearchNode) -> List[SearchNode]:
    """Children of `node`, skipping only the move that undoes the last one.

    There is no closed set: a board reached again through a longer cycle is
    generated again.
    """
    parent_board = node.parent.board if node.parent is not None else None
    return [node.child(b) for b in node.board.neighbors() if b != parent_board]


class Solver:
    """Optimal sliding-puzzle solver (A*, Manhattan distance).

    The initial board and its twin are searched together in one priority
    queue. Exactly one of the two is solvable, so whichever reaches the goal
    first decides: the initial board's side means solved, the twin's side
    proves the initial board infeasible.

    The search runs to completion inside the constructor; afterwards the
    solver only answers queries.
    """

    def __init__(self, initial: Optional[Board], order: Optional[NodeOrder] = None):
        if initial is None:
            raise InvalidArgumentError("initial board must not be None")
        self.initial = initial
        self.expanded = 0
        self.generated = 0
        self.peak_open = 0
        self.elapsed = 0.0
        self._solution: List[Board] = []
        self._infeasible = False
        self._search(initial, order or NodeOrder())

    def _search(self, initial: Board, order: NodeOrder) -> None:
        t0 = perf_counter()
        open_pq: MinPQ[SearchNode] = MinPQ(order)
        open_pq.insert(SearchNode.root(initial))
        open_pq.insert(SearchNode.root(initial.twin(), twin=True))
        self.generated = 2

        solved = False
        node = None
        while not open_pq.is_empty():
            node = open_pq.del_min()

            if node.board.is_goal():
                solved = not node.twin
                self._infeasible = node.twin
                break

            self.expanded += 1
            for child in successors(node):
                open_pq.insert(child)
                self.generated += 1

        self.peak_open = open_pq.peak
        self.elapsed = perf_counter() - t0

        if not (solved or self._infeasible):
            raise EmptyQueueError("search exhausted the queue without reaching either goal")

        if solved:
            self._solution = reconstruct_path(node)
            logger.debug("solved in %d moves", self.moves())
        else:
            logger.debug("twin reached the goal first: initial board is infeasible")
        logger.debug("expanded=%d generated=%d peak_open=%d time=%.4fs",
                     self.expanded, self.generated, self.peak_open, self.elapsed)

    def is_solvable(self) -> bool:
        return not self._infeasible

    def moves(self) -> int:
        """Minimum number of moves to solve the initial board; -1 if unsolvable."""
        if self._infeasible:
            return -1
        return len(self._solution) - 1

    def solution(self) -> Optional[List[Board]]:
        """Boards of a shortest solution, initial first; None if unsolvable."""
        if self._infeasible:
            return None
        return list(self._solution)
