"""Invisible maze session: ready -> active -> won | lost.

Challenge mode counts down the tier's time limit; practice mode never times
out. Walls stay hidden from the snapshot until the player bumps into them.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from cogsuite.games.config import MAZE_LEVELS, MAZE_MAX_ATTEMPTS, MAZE_WALL_PLACEMENT_TRIES, MazeLevel
from cogsuite.games.cells import parse_direction
from cogsuite.games.errors import GameError, InvalidActionError
from cogsuite.games.maze import MazeInstance, MoveOutcome, PlayerState, generate_playable_maze, resolve_maze_move
from cogsuite.games.walls import WallSet, walls_to_list

from .base import IGNORED, GameSession, Transition
from .events import Move, NextLevel, Retry, StartMaze, Tick
from .settings import as_bool, get_setting

MAZE_MODES = ("practice", "challenge")


class MazeSession(GameSession):
    game = "maze"
    handlers = {
        StartMaze: "_on_start",
        Move: "_on_move",
        Tick: "_on_tick",
        Retry: "_on_retry",
        NextLevel: "_on_next_level",
    }

    def __init__(self, session_id=None, rng=None, levels: Optional[List[MazeLevel]] = None):
        super().__init__(session_id, rng)
        self.levels = list(levels or MAZE_LEVELS)
        self.level_index = 0
        self.mode = "practice"
        self.status = "ready"
        self.instance: Optional[MazeInstance] = None
        self.player: Optional[PlayerState] = None
        self.revealed: WallSet = set()
        self.remaining = 0
        self.generation_metrics: Dict[str, Any] = {}

    @property
    def level(self) -> MazeLevel:
        return self.levels[self.level_index]

    def _on_start(self, ev: StartMaze) -> Transition:
        if not 0 <= ev.level_index < len(self.levels):
            raise GameError(f"level index must be in [0, {len(self.levels) - 1}]", code="bad_level")
        if ev.mode not in MAZE_MODES:
            raise GameError(f"mode must be one of {', '.join(MAZE_MODES)}", code="bad_mode")
        self.reseed(ev.seed)
        self.level_index = ev.level_index
        self.mode = ev.mode
        self._new_instance()
        return Transition("started")

    def _new_instance(self) -> None:
        lvl = self.level
        result = generate_playable_maze(
            lvl.grid_size,
            lvl.wall_count,
            rng=self.rng,
            max_attempts=get_setting("MAZE_MAX_ATTEMPTS", MAZE_MAX_ATTEMPTS, int),
            placement_tries=get_setting("MAZE_WALL_PLACEMENT_TRIES", MAZE_WALL_PLACEMENT_TRIES, int),
            strict=get_setting("MAZE_STRICT_GENERATION", False, as_bool),
        )
        self._next_generation()
        self.instance = result.instance
        self.player = PlayerState.initial(result.instance)
        self.revealed = set()
        self.remaining = lvl.time_limit
        self.generation_metrics = result.metrics
        self.status = "active"
        self.log.info(event="maze_level", tier=lvl.name, mode=self.mode, attempts=result.attempts, walls=len(result.instance.walls))

    def _on_move(self, ev: Move) -> Transition:
        if self.status != "active":
            return IGNORED
        try:
            direction = parse_direction(ev.direction)
        except ValueError as e:
            raise GameError(str(e), code="bad_direction") from e
        res = resolve_maze_move(self.instance, self.player, direction)
        self.player = res.player
        if res.outcome is MoveOutcome.BLOCKED:
            self.revealed.add(res.revealed_edge)
        elif res.outcome is MoveOutcome.WON:
            self.status = "won"
        details = {"picked_up_key": res.picked_up_key}
        if res.revealed_edge is not None:
            details["revealed_edge"] = walls_to_list([res.revealed_edge])[0]
        return Transition(res.outcome.value, terminal=self.status == "won", details=details)

    def _on_tick(self, ev: Tick) -> Transition:
        if not self.is_counting_down():
            return IGNORED
        self.remaining = max(0, self.remaining - 1)
        if self.remaining == 0:
            self.status = "lost"
            return Transition("lost", terminal=True)
        return Transition("tick")

    def _on_retry(self, ev: Retry) -> Transition:
        if self.status == "ready":
            raise InvalidActionError("maze has not been started")
        self._new_instance()
        return Transition("started")

    def _on_next_level(self, ev: NextLevel) -> Transition:
        if self.status != "won":
            raise InvalidActionError("next level is only available after winning")
        if self.level_index >= len(self.levels) - 1:
            raise InvalidActionError("already at the hardest level", code="no_next_level")
        self.level_index += 1
        self._new_instance()
        return Transition("started")

    def is_counting_down(self) -> bool:
        return self.status == "active" and self.mode == "challenge"

    def time_left(self) -> Optional[int]:
        return self.remaining if self.mode == "challenge" else None

    def snapshot(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "game": self.game,
            "status": self.status,
            "mode": self.mode,
            "level": self.level.to_dict(),
            "generation": self.generation,
            "time_left": self.time_left(),
        }
        if self.instance is None:
            return data
        inst, pl = self.instance, self.player
        data.update(
            grid_size=inst.grid_size,
            start=list(inst.start),
            door=list(inst.door),
            key=None if pl.has_key else list(inst.key),
            player=pl.to_dict(),
            revealed_walls=walls_to_list(self.revealed),
            has_next_level=self.status == "won" and self.level_index < len(self.levels) - 1,
        )
        if self.status in ("won", "lost"):
            data["walls"] = walls_to_list(inst.walls)
            data["generation_metrics"] = dict(self.generation_metrics)
        return data
