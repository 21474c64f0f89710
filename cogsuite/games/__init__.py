"""Puzzle generation and validation core.

Pure data in, pure data out: no Flask, no timers, no I/O.
"""

from .bubbles import Bubble, check_ranking, generate_bubble_set  # noqa: F401
from .cells import Cell, Direction, parse_direction  # noqa: F401
from .maze import (  # noqa: F401
    Exhausted,
    MazeInstance,
    MoveOutcome,
    MoveResult,
    PlayerState,
    Solved,
    generate_maze,
    generate_playable_maze,
    resolve_maze_move,
)
from .path_puzzle import generate_path_puzzle  # noqa: F401
from .path_validator import PathFailure, PathValidation, validate_path  # noqa: F401
from .reachability import reachable  # noqa: F401
from .tiles import Archetype, Tile, TileGrid, retype_tile, rotate_tile  # noqa: F401
from .walls import add_wall, canonical_edge_key, is_blocked  # noqa: F401

__all__ = [
    "Bubble",
    "check_ranking",
    "generate_bubble_set",
    "Cell",
    "Direction",
    "parse_direction",
    "Exhausted",
    "MazeInstance",
    "MoveOutcome",
    "MoveResult",
    "PlayerState",
    "Solved",
    "generate_maze",
    "generate_playable_maze",
    "resolve_maze_move",
    "generate_path_puzzle",
    "PathFailure",
    "PathValidation",
    "validate_path",
    "reachable",
    "Archetype",
    "Tile",
    "TileGrid",
    "retype_tile",
    "rotate_tile",
    "add_wall",
    "canonical_edge_key",
    "is_blocked",
]
