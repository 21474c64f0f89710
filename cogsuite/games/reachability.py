"""Breadth-first reachability over the maze grid."""
from __future__ import annotations

from collections import deque
from typing import Iterable, Set

from .cells import Cell, in_bounds, neighbors
from .walls import EdgeKey, canonical_edge_key


def reachable_cells(size: int, walls: Iterable[EdgeKey], start: Cell) -> Set[Cell]:
    """Flood from ``start`` and return every cell reachable without crossing a wall."""
    if not in_bounds(start, size):
        return set()
    blocked = walls if isinstance(walls, (set, frozenset)) else set(walls)
    q = deque([start]); vis = {start}
    while q:
        cur = q.popleft()
        for nxt in neighbors(cur, size):
            if nxt in vis or canonical_edge_key(cur, nxt) in blocked:
                continue
            vis.add(nxt); q.append(nxt)
    return vis


def reachable(size: int, walls: Iterable[EdgeKey], start: Cell, goal: Cell) -> bool:
    if not in_bounds(goal, size):
        return False
    return goal in reachable_cells(size, walls, start)


__all__ = ["reachable", "reachable_cells"]
