"""Shared plumbing for the per-player game sessions.

A session owns one game's current puzzle instance and the player's progress
in it. It is the single writer of that state: every change, whether from a
player action or a timer tick, goes through ``dispatch``. Regenerating the
puzzle (retry, next level, next question) bumps ``generation`` so ticks
scheduled for the previous instance are recognised as stale and dropped.
"""
from __future__ import annotations

import random
import threading
import uuid
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from cogsuite.games.errors import InvalidActionError
from cogsuite.logging_utils import get_logger

from .events import Tick


@dataclass
class Transition:
    outcome: str
    terminal: bool = False
    details: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {"outcome": self.outcome, "terminal": self.terminal, **self.details}


STALE = Transition("stale")
IGNORED = Transition("ignored")


class GameSession:
    game = "base"
    handlers: Dict[type, str] = {}

    def __init__(self, session_id: Optional[str] = None, rng: Optional[random.Random] = None):
        self.id = session_id or uuid.uuid4().hex
        self.rng = rng or random.Random()
        self.generation = 0
        self.closed = False
        self._lock = threading.RLock()
        self.log = get_logger(f"cogsuite.{self.game}").bind(session=self.id[:8])

    @property
    def room(self) -> str:
        return f"{self.game}:{self.id}"

    def dispatch(self, event) -> Transition:
        name = self.handlers.get(type(event))
        if name is None:
            raise InvalidActionError(f"{self.game} does not accept {type(event).__name__}", code="unsupported_event")
        handler: Callable[[Any], Transition] = getattr(self, name)
        with self._lock:
            if self.closed:
                return STALE
            if isinstance(event, Tick) and event.generation != self.generation:
                return STALE
            result = handler(event)
        if result.outcome not in ("ignored", "tick"):
            self.log.debug(event=f"{self.game}_transition", action=type(event).__name__, outcome=result.outcome)
        return result

    def close(self) -> None:
        """Retire the session; any pending timer for it stops at its next tick."""
        with self._lock:
            self.closed = True
            self.generation += 1

    def reseed(self, seed: Optional[int]) -> None:
        if seed is not None:
            self.rng = random.Random(seed)

    def _next_generation(self) -> int:
        self.generation += 1
        return self.generation

    def is_counting_down(self) -> bool:
        return False

    def time_left(self) -> Optional[int]:
        return None

    def snapshot(self) -> Dict[str, Any]:  # pragma: no cover - overridden
        raise NotImplementedError
