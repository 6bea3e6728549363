from __future__ import annotations
from typing import Generic, List, Protocol, Tuple, TypeVar
import heapq
import itertools

from slider.search.errors import EmptyQueueError


class Ranked(Protocol):
    g: int
    h: int


T = TypeVar("T", bound=Ranked)


class NodeOrder:
    """Total order over search nodes: f = g + h ascending, then h ascending.

    Ties left after (f, h) are broken by insertion order inside MinPQ.
    """

    def key(self, node: Ranked) -> Tuple[int, int]:
        return (node.g + node.h, node.h)

    def compare(self, a: Ranked, b: Ranked) -> int:
        ka, kb = self.key(a), self.key(b)
        return (ka > kb) - (ka < kb)


class MinPQ(Generic[T]):
    """Binary min-heap of nodes ranked by an order strategy."""

    def __init__(self, order: NodeOrder | None = None):
        self.order = order or NodeOrder()
        self._heap: List[Tuple[Tuple[int, ...], int, T]] = []
        self._counter = itertools.count()
        self.peak = 0

    def insert(self, node: T) -> None:
        heapq.heappush(self._heap, (self.order.key(node), next(self._counter), node))
        self.peak = max(self.peak, len(self._heap))

    def del_min(self) -> T:
        if not self._heap:
            raise EmptyQueueError("priority queue underflow")
        _, _, node = heapq.heappop(self._heap)
        return node

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)
