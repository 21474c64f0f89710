"""In-process session store keyed by (player id, game).

Each player has at most one live session per game. ``replace`` swaps the new
session in and closes the old one under the same lock, so a timer that still
holds the old session sees it closed and stops.
"""
from __future__ import annotations

import threading
from collections import OrderedDict
from typing import Dict, Optional, Tuple, Type

from .base import GameSession
from .bubble_session import BubbleSession
from .maze_session import MazeSession
from .path_session import PathSession

SESSION_TYPES: Dict[str, Type[GameSession]] = {
    "maze": MazeSession,
    "path": PathSession,
    "bubble": BubbleSession,
}

Key = Tuple[str, str]


class SessionRegistry:
    def __init__(self, max_sessions: int = 512):
        self.max_sessions = max_sessions
        self._sessions: "OrderedDict[Key, GameSession]" = OrderedDict()
        self._lock = threading.Lock()

    def get(self, player_id: str, game: str) -> Optional[GameSession]:
        with self._lock:
            sess = self._sessions.get((player_id, game))
            if sess is not None:
                self._sessions.move_to_end((player_id, game))
            return sess

    def replace(self, player_id: str, game: str, session: GameSession) -> GameSession:
        with self._lock:
            old = self._sessions.pop((player_id, game), None)
            if old is not None:
                old.close()
            self._sessions[(player_id, game)] = session
            while len(self._sessions) > self.max_sessions:
                _, evicted = self._sessions.popitem(last=False)
                evicted.close()
        return session

    def drop(self, player_id: str, game: str) -> None:
        with self._lock:
            old = self._sessions.pop((player_id, game), None)
        if old is not None:
            old.close()

    def clear(self) -> None:
        with self._lock:
            sessions = list(self._sessions.values())
            self._sessions.clear()
        for s in sessions:
            s.close()

    def __len__(self) -> int:
        return len(self._sessions)


registry = SessionRegistry()
