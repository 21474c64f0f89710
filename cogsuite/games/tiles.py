"""Rotating path tiles.

Each tile carries four connection flags indexed by ``Direction``
(up, right, down, left). A tile's flags are always one of the four archetype
shapes turned clockwise ``rotation // 90`` times; rotation permutes the flags
in place rather than being applied when the grid is queried.
"""
from __future__ import annotations

import random
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .cells import Direction

Connections = Tuple[bool, bool, bool, bool]


class Archetype(str, Enum):
    STRAIGHT = "straight"
    CORNER = "corner"
    TEE = "tee"
    CROSS = "cross"

    @property
    def connections(self) -> Connections:
        return ARCHETYPE_CONNECTIONS[self]


# Unrotated shapes, [up, right, down, left]
ARCHETYPE_CONNECTIONS: Dict[Archetype, Connections] = {
    Archetype.STRAIGHT: (True, False, True, False),  # |
    Archetype.CORNER: (True, True, False, False),  # L
    Archetype.TEE: (False, True, True, True),  # T pointing down
    Archetype.CROSS: (True, True, True, True),  # +
}


def rotate_connections(conns: Connections, turns: int = 1) -> Connections:
    """Turn the flags clockwise: [u, r, d, l] -> [l, u, r, d] per quarter turn."""
    out = tuple(conns)
    for _ in range(turns % 4):
        u, r, d, l = out
        out = (l, u, r, d)
    return out  # type: ignore[return-value]


@dataclass(frozen=True)
class Tile:
    id: str
    row: int
    col: int
    archetype: Archetype
    connections: Connections
    rotation: int = 0  # degrees, one of 0/90/180/270

    @classmethod
    def build(cls, row: int, col: int, archetype: Archetype, turns: int = 0) -> "Tile":
        return cls(
            id=tile_id(row, col),
            row=row,
            col=col,
            archetype=archetype,
            connections=rotate_connections(archetype.connections, turns),
            rotation=(turns % 4) * 90,
        )

    def is_open(self, direction: Direction) -> bool:
        return self.connections[direction]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "row": self.row,
            "col": self.col,
            "archetype": self.archetype.value,
            "connections": list(self.connections),
            "rotation": self.rotation,
        }


def tile_id(row: int, col: int) -> str:
    return f"{row}-{col}"


def rotate_tile(tile: Tile) -> Tile:
    return replace(tile, connections=rotate_connections(tile.connections, 1), rotation=(tile.rotation + 90) % 360)


def retype_tile(tile: Tile, rng: random.Random | None = None) -> Tile:
    """Swap in a uniformly chosen archetype, unrotated. May pick the current one."""
    rng = rng or random
    archetype = rng.choice(list(Archetype))
    return replace(tile, archetype=archetype, connections=archetype.connections, rotation=0)


@dataclass
class TileGrid:
    size: int
    start_row: int
    end_row: int
    tiles: List[Tile] = field(default_factory=list)

    def __post_init__(self):
        self._index: Dict[Tuple[int, int], int] = {(t.row, t.col): i for i, t in enumerate(self.tiles)}

    def tile_at(self, row: int, col: int) -> Optional[Tile]:
        i = self._index.get((row, col))
        return self.tiles[i] if i is not None else None

    def get(self, tid: str) -> Optional[Tile]:
        for t in self.tiles:
            if t.id == tid:
                return t
        return None

    def put(self, tile: Tile) -> None:
        """Replace the tile occupying ``tile``'s cell."""
        i = self._index.get((tile.row, tile.col))
        if i is None:
            raise KeyError(f"no tile at ({tile.row}, {tile.col})")
        self.tiles[i] = tile

    @property
    def start_tile(self) -> Optional[Tile]:
        return self.tile_at(self.start_row, 0)

    @property
    def end_tile(self) -> Optional[Tile]:
        return self.tile_at(self.end_row, self.size - 1)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "size": self.size,
            "start_row": self.start_row,
            "end_row": self.end_row,
            "tiles": [t.to_dict() for t in self.tiles],
        }


__all__ = [
    "Archetype",
    "ARCHETYPE_CONNECTIONS",
    "Tile",
    "TileGrid",
    "rotate_connections",
    "rotate_tile",
    "retype_tile",
    "tile_id",
]
