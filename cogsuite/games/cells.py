from enum import IntEnum
from typing import Iterator, Tuple

Cell = Tuple[int, int]  # (row, col)


class Direction(IntEnum):
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    @property
    def delta(self) -> Tuple[int, int]:
        return DELTAS[self]

    @property
    def opposite(self) -> "Direction":
        return Direction((self + 2) % 4)


DELTAS = {
    Direction.UP: (-1, 0),
    Direction.RIGHT: (0, 1),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
}

# Accepted spellings from clients (arrow keys, compass letters, names)
_ALIASES = {
    "up": Direction.UP, "u": Direction.UP, "n": Direction.UP, "arrowup": Direction.UP,
    "right": Direction.RIGHT, "r": Direction.RIGHT, "e": Direction.RIGHT, "arrowright": Direction.RIGHT,
    "down": Direction.DOWN, "d": Direction.DOWN, "s": Direction.DOWN, "arrowdown": Direction.DOWN,
    "left": Direction.LEFT, "l": Direction.LEFT, "w": Direction.LEFT, "arrowleft": Direction.LEFT,
}


def parse_direction(value) -> Direction:
    if isinstance(value, Direction):
        return value
    if isinstance(value, str):
        d = _ALIASES.get(value.strip().lower())
        if d is not None:
            return d
    raise ValueError(f"unknown direction: {value!r}")


def in_bounds(cell: Cell, size: int) -> bool:
    r, c = cell
    return 0 <= r < size and 0 <= c < size


def step(cell: Cell, direction: Direction) -> Cell:
    dr, dc = DELTAS[direction]
    return (cell[0] + dr, cell[1] + dc)


def neighbors(cell: Cell, size: int) -> Iterator[Cell]:
    """Yield the in-bounds axis neighbors of ``cell``."""
    for d in Direction:
        n = step(cell, d)
        if in_bounds(n, size):
            yield n


def is_adjacent(a: Cell, b: Cell) -> bool:
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1


def all_cells(size: int) -> Iterator[Cell]:
    for r in range(size):
        for c in range(size):
            yield (r, c)


__all__ = ["Cell", "Direction", "DELTAS", "parse_direction", "in_bounds", "step", "neighbors", "is_adjacent", "all_cells"]
