"""Events accepted by the game sessions.

User input and timer ticks share one entry point (``GameSession.dispatch``),
so a countdown reaching zero is just another transition.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple

from cogsuite.games.errors import GameError


@dataclass(frozen=True)
class Tick:
    """One elapsed second for the instance identified by ``generation``."""

    generation: int


# --- maze ---
@dataclass(frozen=True)
class StartMaze:
    level_index: int = 0
    mode: str = "practice"
    seed: Optional[int] = None


@dataclass(frozen=True)
class Move:
    direction: str


@dataclass(frozen=True)
class Retry:
    pass


@dataclass(frozen=True)
class NextLevel:
    pass


# --- path puzzle ---
@dataclass(frozen=True)
class StartPath:
    mode: str = "practice"
    seed: Optional[int] = None


@dataclass(frozen=True)
class SelectTile:
    tile_id: str


@dataclass(frozen=True)
class Rotate:
    pass


@dataclass(frozen=True)
class Retype:
    pass


@dataclass(frozen=True)
class CheckPath:
    pass


@dataclass(frozen=True)
class NextPuzzle:
    pass


# --- bubble sort ---
@dataclass(frozen=True)
class Advance:
    """Leave an info screen (intro, practice info, practice end)."""


@dataclass(frozen=True)
class SelectBubble:
    bubble_id: int


def _require(payload: Dict[str, Any], name: str, kind: type) -> Any:
    value = payload.get(name)
    if not isinstance(value, kind) or isinstance(value, bool):
        raise GameError(f"'{name}' must be {kind.__name__}", code="bad_payload")
    return value


# (game, action) -> factory(payload) for socket and HTTP action names
ACTIONS: Dict[Tuple[str, str], Callable[[Dict[str, Any]], Any]] = {
    ("maze", "move"): lambda p: Move(_require(p, "dir", str)),
    ("maze", "retry"): lambda p: Retry(),
    ("maze", "next"): lambda p: NextLevel(),
    ("path", "select"): lambda p: SelectTile(_require(p, "tile_id", str)),
    ("path", "rotate"): lambda p: Rotate(),
    ("path", "retype"): lambda p: Retype(),
    ("path", "check"): lambda p: CheckPath(),
    ("path", "next"): lambda p: NextPuzzle(),
    ("path", "retry"): lambda p: Retry(),
    ("bubble", "advance"): lambda p: Advance(),
    ("bubble", "select"): lambda p: SelectBubble(_require(p, "bubble_id", int)),
}


def build_event(game: str, action: str, payload: Dict[str, Any] | None = None):
    factory = ACTIONS.get((game, action))
    if factory is None:
        raise GameError(f"unknown action '{action}' for {game}", code="unknown_action")
    return factory(payload or {})
