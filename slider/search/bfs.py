from collections import deque
from time import perf_counter
from typing import Dict, Optional, Set

from slider.domains.board import Board

def bfs(start: Board):
    """Breadth-first search to the goal; optimal reference for small boards."""
    t0 = perf_counter()
    q = deque([start])
    parent: Dict[Board, Optional[Board]] = {start: None}
    expanded = generated = 0
    seen: Set[Board] = {start}
    while q:
        s = q.popleft()
        if s.is_goal():
            path = []
            while s is not None:
                path.append(s); s = parent[s]
            return {"path": list(reversed(path)), "g": len(path) - 1, "expanded": expanded,
                    "generated": generated, "time": perf_counter()-t0, "algorithm": "BFS",
                    "termination": "ok"}
        expanded += 1
        for s2 in s.neighbors():
            generated += 1
            if s2 in seen: continue
            seen.add(s2); parent[s2] = s; q.append(s2)
    return {"path": None, "g": None, "expanded": expanded, "generated": generated,
            "time": perf_counter()-t0, "algorithm": "BFS", "termination": "exhausted"}
