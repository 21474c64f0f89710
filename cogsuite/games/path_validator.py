"""Depth-first check that the tiles connect the start edge to the end edge."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .cells import Direction, step
from .tiles import TileGrid


class PathFailure(str, Enum):
    NO_START_CONNECTION = "no-start-connection"
    NO_PATH = "no-path"


FAILURE_MESSAGES = {
    PathFailure.NO_START_CONNECTION: "Path must start at the indicated start point!",
    PathFailure.NO_PATH: "Path is not complete or invalid! Check connections.",
}


@dataclass(frozen=True)
class PathValidation:
    ok: bool
    reason: Optional[PathFailure] = None

    @property
    def message(self) -> Optional[str]:
        return FAILURE_MESSAGES.get(self.reason) if self.reason else None

    def to_dict(self):
        return {"ok": self.ok, "reason": self.reason.value if self.reason else None, "message": self.message}


def validate_path(grid: TileGrid, start_row: int | None = None, end_row: int | None = None) -> PathValidation:
    start = grid.start_tile if start_row is None else grid.tile_at(start_row, 0)
    end = grid.end_tile if end_row is None else grid.tile_at(end_row, grid.size - 1)
    if start is None or not start.is_open(Direction.LEFT):
        return PathValidation(ok=False, reason=PathFailure.NO_START_CONNECTION)
    stack = [start]; visited = set()
    while stack:
        cur = stack.pop()
        if cur.id in visited:
            continue
        visited.add(cur.id)
        if end is not None and cur.id == end.id and cur.is_open(Direction.RIGHT):
            return PathValidation(ok=True)
        for d in Direction:
            if not cur.is_open(d):
                continue
            nr, nc = step((cur.row, cur.col), d)
            nb = grid.tile_at(nr, nc)
            # both sides of the shared edge must be open
            if nb is not None and nb.id not in visited and nb.is_open(d.opposite):
                stack.append(nb)
    return PathValidation(ok=False, reason=PathFailure.NO_PATH)


__all__ = ["PathFailure", "PathValidation", "validate_path", "FAILURE_MESSAGES"]
