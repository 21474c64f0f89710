"""Edge keys and wall sets for the invisible maze grid.

A wall blocks movement between two adjacent cells. Walls are stored under a
canonical key so that (a, b) and (b, a) name the same edge.
"""
from __future__ import annotations

from typing import Iterable, List, Optional, Set, Tuple

from .cells import Cell, in_bounds, is_adjacent

EdgeKey = Tuple[Cell, Cell]
WallSet = Set[EdgeKey]


def canonical_edge_key(a: Cell, b: Cell, size: Optional[int] = None) -> EdgeKey:
    """Sorted key for the edge between adjacent cells a and b.

    Negative coordinates are always rejected; with ``size`` both cells must
    also lie inside the size x size grid.
    """
    if not is_adjacent(a, b):
        raise ValueError(f"cells {a} and {b} are not adjacent")
    for cell in (a, b):
        if min(cell) < 0 or (size is not None and not in_bounds(cell, size)):
            raise ValueError(f"cell {cell} is outside the grid")
    a = (int(a[0]), int(a[1]))
    b = (int(b[0]), int(b[1]))
    return (a, b) if a <= b else (b, a)


def add_wall(walls: WallSet, a: Cell, b: Cell, size: Optional[int] = None) -> bool:
    """Insert the wall between a and b. Returns False if it was already present."""
    key = canonical_edge_key(a, b, size)
    if key in walls:
        return False
    walls.add(key)
    return True


def is_blocked(walls: Iterable[EdgeKey], a: Cell, b: Cell) -> bool:
    return canonical_edge_key(a, b) in walls


def edge_to_str(key: EdgeKey) -> str:
    (r1, c1), (r2, c2) = key
    return f"{r1},{c1}-{r2},{c2}"


def walls_to_list(walls: Iterable[EdgeKey]) -> List[str]:
    return sorted(edge_to_str(k) for k in walls)


__all__ = ["EdgeKey", "WallSet", "canonical_edge_key", "add_wall", "is_blocked", "edge_to_str", "walls_to_list"]
