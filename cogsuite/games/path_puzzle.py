"""Random tile grids for the arrow path puzzle.

Every cell gets an independent archetype and quarter-turn count, and the
start/end rows are drawn independently (they may coincide). Nothing here
makes the grid solvable: turning and swapping tiles until it is solvable is
the puzzle.
"""
from __future__ import annotations

import random

from .config import path_grid_size
from .tiles import Archetype, Tile, TileGrid


def generate_path_puzzle(grid_size: int, rng: random.Random | None = None) -> TileGrid:
    if grid_size < 1:
        raise ValueError("path grid must be at least 1x1")
    rng = rng or random
    archetypes = list(Archetype)
    tiles = []
    for r in range(grid_size):
        for c in range(grid_size):
            tiles.append(Tile.build(r, c, rng.choice(archetypes), rng.randrange(4)))
    start_row = rng.randrange(grid_size)
    end_row = rng.randrange(grid_size)
    return TileGrid(size=grid_size, start_row=start_row, end_row=end_row, tiles=tiles)


def generate_for_level(level: int, rng: random.Random | None = None) -> TileGrid:
    return generate_path_puzzle(path_grid_size(level), rng)


__all__ = ["generate_path_puzzle", "generate_for_level"]
