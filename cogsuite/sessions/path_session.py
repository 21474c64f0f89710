"""Arrow path session: intro -> playing -> success | fail."""
from __future__ import annotations

from typing import Any, Dict, Optional

from cogsuite.games.config import PATH_ASSESSMENT_START_LEVEL, PATH_PRACTICE_START_LEVEL, path_time_limit
from cogsuite.games.errors import GameError, InvalidActionError
from cogsuite.games.path_puzzle import generate_for_level
from cogsuite.games.path_validator import PathValidation, validate_path
from cogsuite.games.tiles import Tile, TileGrid, retype_tile, rotate_tile

from .base import IGNORED, GameSession, Transition
from .events import CheckPath, NextPuzzle, Retry, Retype, Rotate, SelectTile, StartPath, Tick

PATH_MODES = ("practice", "assessment")


class PathSession(GameSession):
    game = "path"
    handlers = {
        StartPath: "_on_start",
        SelectTile: "_on_select",
        Rotate: "_on_rotate",
        Retype: "_on_retype",
        CheckPath: "_on_check",
        Tick: "_on_tick",
        NextPuzzle: "_on_next",
        Retry: "_on_retry",
    }

    def __init__(self, session_id=None, rng=None):
        super().__init__(session_id, rng)
        self.state = "intro"
        self.mode = "practice"
        self.level = PATH_PRACTICE_START_LEVEL
        self.grid: Optional[TileGrid] = None
        self.selected: Optional[str] = None
        self.moves = 0
        self.remaining = 0
        self.last_check: Optional[PathValidation] = None

    def _on_start(self, ev: StartPath) -> Transition:
        if ev.mode not in PATH_MODES:
            raise GameError(f"mode must be one of {', '.join(PATH_MODES)}", code="bad_mode")
        self.reseed(ev.seed)
        self.mode = ev.mode
        self.level = PATH_PRACTICE_START_LEVEL if ev.mode == "practice" else PATH_ASSESSMENT_START_LEVEL
        self._new_puzzle()
        return Transition("started")

    def _new_puzzle(self) -> None:
        grid = generate_for_level(self.level, self.rng)
        self._next_generation()
        self.grid = grid
        self.selected = None
        self.moves = 0
        self.last_check = None
        self.remaining = 0 if self.mode == "practice" else path_time_limit(grid.size)
        self.state = "playing"
        self.log.info(event="path_puzzle", puzzle_level=self.level, size=grid.size, start_row=grid.start_row, end_row=grid.end_row)

    def _require_playing(self) -> None:
        if self.state != "playing":
            raise InvalidActionError(f"puzzle is not in play (state={self.state})")

    def _selected_tile(self) -> Tile:
        self._require_playing()
        tile = self.grid.get(self.selected) if self.selected else None
        if tile is None:
            raise InvalidActionError("select a tile first", code="no_selection")
        return tile

    def _on_select(self, ev: SelectTile) -> Transition:
        self._require_playing()
        if self.grid.get(ev.tile_id) is None:
            raise GameError(f"unknown tile '{ev.tile_id}'", code="unknown_tile")
        self.selected = ev.tile_id
        return Transition("selected", details={"tile_id": ev.tile_id})

    def _on_rotate(self, ev: Rotate) -> Transition:
        tile = rotate_tile(self._selected_tile())
        self.grid.put(tile)
        self.moves += 1
        return Transition("rotated", details={"tile": tile.to_dict()})

    def _on_retype(self, ev: Retype) -> Transition:
        tile = retype_tile(self._selected_tile(), self.rng)
        self.grid.put(tile)
        self.moves += 1
        return Transition("retyped", details={"tile": tile.to_dict()})

    def _on_check(self, ev: CheckPath) -> Transition:
        self._require_playing()
        result = validate_path(self.grid)
        self.last_check = result
        if result.ok:
            self.state = "success"
            return Transition("success", terminal=True, details=result.to_dict())
        return Transition(result.reason.value, details=result.to_dict())

    def _on_tick(self, ev: Tick) -> Transition:
        if not self.is_counting_down():
            return IGNORED
        self.remaining = max(0, self.remaining - 1)
        if self.remaining == 0:
            self.state = "fail"
            return Transition("fail", terminal=True)
        return Transition("tick")

    def _on_next(self, ev: NextPuzzle) -> Transition:
        if self.state != "success":
            raise InvalidActionError("solve the current puzzle first")
        self.level += 1
        self._new_puzzle()
        return Transition("started")

    def _on_retry(self, ev: Retry) -> Transition:
        if self.state == "intro":
            raise InvalidActionError("puzzle has not been started")
        self._new_puzzle()
        return Transition("started")

    def is_counting_down(self) -> bool:
        return self.state == "playing" and self.mode == "assessment"

    def time_left(self) -> Optional[int]:
        return self.remaining if self.mode == "assessment" else None

    def snapshot(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "game": self.game,
            "state": self.state,
            "mode": self.mode,
            "level": self.level,
            "generation": self.generation,
            "time_left": self.time_left(),
            "moves": self.moves,
            "selected": self.selected,
            "last_check": self.last_check.to_dict() if self.last_check else None,
        }
        if self.grid is not None:
            data["grid"] = self.grid.to_dict()
        return data
