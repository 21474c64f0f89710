"""Invisible maze: level generation and move resolution.

Generation is rejection sampling. Each attempt places the key and door at
random, scatters ``wall_count`` random walls, and keeps the candidate only if
the player can walk start -> key and key -> door. The result is tagged so the
caller can tell a verified layout (``Solved``) from the fallback candidate
returned when the attempt bound runs out (``Exhausted``).

Move resolution is a pure function of (instance, player state, direction).
Hitting a wall reveals it, counts an attempt and sends the player back to the
start; the wall set itself never changes after generation.
"""
from __future__ import annotations

import random
import time
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, FrozenSet, Optional

from cogsuite.logging_utils import get_logger

from .cells import Cell, Direction, all_cells, in_bounds, parse_direction, step
from .config import MAZE_MAX_ATTEMPTS, MAZE_WALL_PLACEMENT_TRIES
from .errors import MazeGenerationExhausted
from .metrics import init_metrics
from .reachability import reachable
from .walls import EdgeKey, WallSet, add_wall, canonical_edge_key, walls_to_list

_log = get_logger("cogsuite.maze")


def start_cell(grid_size: int) -> Cell:
    """Bottom-left corner; the player always enters here."""
    return (grid_size - 1, 0)


@dataclass(frozen=True)
class MazeInstance:
    grid_size: int
    start: Cell
    key: Cell
    door: Cell
    walls: FrozenSet[EdgeKey]

    def is_solvable(self) -> bool:
        return reachable(self.grid_size, self.walls, self.start, self.key) and reachable(
            self.grid_size, self.walls, self.key, self.door
        )

    def to_dict(self, include_walls: bool = True) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "grid_size": self.grid_size,
            "start": list(self.start),
            "key": list(self.key),
            "door": list(self.door),
        }
        if include_walls:
            data["walls"] = walls_to_list(self.walls)
        return data


@dataclass(frozen=True)
class PlayerState:
    position: Cell
    has_key: bool = False
    attempts: int = 0

    @classmethod
    def initial(cls, instance: MazeInstance) -> "PlayerState":
        return cls(position=instance.start)

    def to_dict(self):
        return {"position": list(self.position), "has_key": self.has_key, "attempts": self.attempts}


@dataclass(frozen=True)
class Solved:
    instance: MazeInstance
    attempts: int
    metrics: Dict[str, Any] = field(default_factory=dict, compare=False)
    solved = True


@dataclass(frozen=True)
class Exhausted:
    """Attempt bound reached; ``instance`` is the last candidate and may be unsolvable."""

    instance: MazeInstance
    attempts: int
    metrics: Dict[str, Any] = field(default_factory=dict, compare=False)
    solved = False


def place_walls(
    grid_size: int,
    wall_count: int,
    rng: random.Random | None = None,
    max_tries: int = MAZE_WALL_PLACEMENT_TRIES,
    metrics: Optional[Dict[str, Any]] = None,
) -> WallSet:
    """Scatter up to ``wall_count`` distinct walls on random adjacent cell pairs.

    May return fewer walls than requested when ``max_tries`` runs out first.
    """
    rng = rng or random
    walls: WallSet = set()
    if grid_size < 2:
        return walls
    tries = 0
    while len(walls) < wall_count and tries < max_tries:
        tries += 1
        if rng.random() < 0.5:
            # wall between horizontal neighbours (same row)
            r = rng.randrange(grid_size); c = rng.randrange(grid_size - 1)
            a, b = (r, c), (r, c + 1)
        else:
            r = rng.randrange(grid_size - 1); c = rng.randrange(grid_size)
            a, b = (r, c), (r + 1, c)
        add_wall(walls, a, b, grid_size)
    if metrics is not None:
        metrics['placement_tries'] += tries
    return walls


def _pick_key_and_door(grid_size: int, start: Cell, rng) -> tuple[Cell, Cell]:
    cells = [c for c in all_cells(grid_size) if c != start]
    key = rng.choice(cells)
    door = rng.choice([c for c in cells if c != key])
    return key, door


def generate_maze(
    grid_size: int,
    wall_count: int,
    rng: random.Random | None = None,
    max_attempts: int = MAZE_MAX_ATTEMPTS,
    placement_tries: int = MAZE_WALL_PLACEMENT_TRIES,
) -> Solved | Exhausted:
    """Sample candidates until one is solvable or ``max_attempts`` is spent."""
    if grid_size < 2:
        raise ValueError("maze grid must be at least 2x2")
    if wall_count < 0:
        raise ValueError("wall_count must be non-negative")
    rng = rng or random
    metrics = init_metrics()
    metrics['walls_requested'] = wall_count
    started = time.perf_counter()
    start = start_cell(grid_size)
    candidate: Optional[MazeInstance] = None
    attempts = 0
    solved = False
    while not solved and attempts < max(1, max_attempts):
        attempts += 1
        key, door = _pick_key_and_door(grid_size, start, rng)
        walls = place_walls(grid_size, wall_count, rng, placement_tries, metrics)
        candidate = MazeInstance(grid_size=grid_size, start=start, key=key, door=door, walls=frozenset(walls))
        solved = reachable(grid_size, walls, start, key) and reachable(grid_size, walls, key, door)
        if not solved:
            metrics['candidates_rejected'] += 1
    metrics['attempts'] = attempts
    metrics['walls_placed'] = len(candidate.walls)
    metrics['runtime_ms'] = int((time.perf_counter() - started) * 1000)
    if solved:
        return Solved(candidate, attempts, metrics)
    metrics['exhausted'] = True
    return Exhausted(candidate, attempts, metrics)


def generate_playable_maze(
    grid_size: int,
    wall_count: int,
    rng: random.Random | None = None,
    max_attempts: int = MAZE_MAX_ATTEMPTS,
    placement_tries: int = MAZE_WALL_PLACEMENT_TRIES,
    strict: bool = False,
) -> Solved:
    """Like ``generate_maze`` but never hands back an unverified layout.

    On exhaustion the wall count drops by one and sampling restarts; a grid
    with no walls is always solvable so this terminates. With ``strict`` the
    first exhaustion raises ``MazeGenerationExhausted`` instead.
    """
    walls = wall_count
    while True:
        result = generate_maze(grid_size, walls, rng, max_attempts, placement_tries)
        if result.solved:
            if walls != wall_count:
                result.metrics['walls_relaxed_from'] = wall_count
            return result
        _log.warn(event="maze_generation_exhausted", grid_size=grid_size, walls=walls, attempts=result.attempts, strict=strict)
        if strict:
            raise MazeGenerationExhausted(grid_size, walls, result.attempts)
        walls = max(0, walls - 1)


class MoveOutcome(str, Enum):
    IGNORED = "ignored"
    MOVED = "moved"
    BLOCKED = "blocked"
    WON = "won"


@dataclass(frozen=True)
class MoveResult:
    player: PlayerState
    outcome: MoveOutcome
    revealed_edge: Optional[EdgeKey] = None
    picked_up_key: bool = False


def resolve_maze_move(instance: MazeInstance, player: PlayerState, direction) -> MoveResult:
    """Apply one directional input to ``player`` and report what happened."""
    d: Direction = parse_direction(direction)
    target = step(player.position, d)
    if not in_bounds(target, instance.grid_size):
        return MoveResult(player=player, outcome=MoveOutcome.IGNORED)
    edge = canonical_edge_key(player.position, target)
    if edge in instance.walls:
        bumped = replace(player, position=instance.start, attempts=player.attempts + 1)
        return MoveResult(player=bumped, outcome=MoveOutcome.BLOCKED, revealed_edge=edge)
    picked = target == instance.key and not player.has_key
    moved = replace(player, position=target, has_key=player.has_key or picked)
    if target == instance.door and moved.has_key:
        return MoveResult(player=moved, outcome=MoveOutcome.WON, picked_up_key=picked)
    return MoveResult(player=moved, outcome=MoveOutcome.MOVED, picked_up_key=picked)


__all__ = [
    "MazeInstance",
    "PlayerState",
    "Solved",
    "Exhausted",
    "MoveOutcome",
    "MoveResult",
    "start_cell",
    "place_walls",
    "generate_maze",
    "generate_playable_maze",
    "resolve_maze_move",
]
