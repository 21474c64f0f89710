"""One-second countdown tasks for timed sessions.

Each running task is bound to the session generation it was started for.
Ticks go through ``session.dispatch`` like any player action; once the
session is closed or regenerated the task exits without touching it.
"""
from __future__ import annotations

import threading
from typing import Optional

from cogsuite import socketio
from cogsuite.logging_utils import get_logger

from .base import GameSession
from .events import Tick
from .settings import as_bool, get_setting

log = get_logger("cogsuite.timers")

# session id -> generation with a live countdown
_running: dict[str, int] = {}
_lock = threading.Lock()


def timers_enabled() -> bool:
    return get_setting("GAME_TIMERS_ENABLED", True, as_bool)


def start_countdown(session: GameSession) -> Optional[int]:
    """Start ticking ``session`` if it is timed. Returns the bound generation."""
    if not timers_enabled() or not session.is_counting_down():
        return None
    generation = session.generation
    with _lock:
        if _running.get(session.id) == generation:
            return generation
        _running[session.id] = generation
    socketio.start_background_task(run_countdown, session, generation)
    return generation


def run_countdown(session: GameSession, generation: int, sleep=None) -> int:
    """Tick until the session stops counting down. Returns ticks delivered."""
    sleep = sleep or socketio.sleep
    ticks = 0
    try:
        while True:
            sleep(1)
            if session.closed or session.generation != generation:
                break
            result = session.dispatch(Tick(generation))
            if result.outcome == "stale":
                break
            ticks += 1
            socketio.emit("timer_update", {"game": session.game, "time_left": session.time_left(), "outcome": result.outcome}, to=session.room)
            if result.terminal or result.outcome == "timeout":
                socketio.emit("game_update", {"transition": result.to_dict(), "state": session.snapshot()}, to=session.room)
            if not session.is_counting_down():
                break
            if result.outcome == "timeout":
                # the next question has its own generation; keep ticking for it
                nxt = result.details.get("generation", generation)
                with _lock:
                    if _running.get(session.id, generation) != generation:
                        break
                    _running[session.id] = nxt
                generation = nxt
    finally:
        with _lock:
            if _running.get(session.id) == generation:
                _running.pop(session.id, None)
    log.debug(event="countdown_end", game=session.game, generation=generation, ticks=ticks)
    return ticks
