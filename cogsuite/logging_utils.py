"""Minimal structured logging helper.

Emits one key=value line (or a JSON object) per event with a timestamp and
level, which keeps session transitions and generation metrics grep-able.

Usage:
    from cogsuite.logging_utils import get_logger
    log = get_logger("maze").bind(session="ab12")
    log.info(event="maze_move", outcome="blocked", attempts=2)

Environment:
    COGSUITE_LOG_LEVEL  debug|info|warn|error (default info)
    COGSUITE_LOG_JSON   1/true/yes/on for JSON lines

Reserved keys: level, ts, logger.
"""

from __future__ import annotations

import json
import os
import sys
import time

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
RESERVED = ("level", "ts", "logger")


def _current_level() -> int:
    return LEVELS.get(os.getenv("COGSUITE_LOG_LEVEL", "info").lower(), 20)


def _json_mode() -> bool:
    return os.getenv("COGSUITE_LOG_JSON", "0").lower() in ("1", "true", "yes", "on")


def _format(level: str, /, **fields) -> str:
    if _json_mode():
        rec = {k: v for k, v in fields.items() if v is not None}
        rec["level"] = level
        rec["ts"] = int(time.time())
        return json.dumps(rec, separators=(",", ":"), default=str)
    parts = [f"level={level}", f"ts={int(time.time())}"]
    for k, v in fields.items():
        if v is None:
            continue
        if isinstance(v, bool):
            parts.append(f"{k}={str(v).lower()}")
        elif isinstance(v, (int, float)):
            parts.append(f"{k}={v}")
        else:
            parts.append(f"{k}={str(v).replace(' ', '_')}")
    return " ".join(parts)


class _Logger:
    def __init__(self, name: str, context: dict | None = None):
        self.name = name
        self.context = dict(context or {})

    def bind(self, **fields) -> "_Logger":
        """Return a child logger that adds ``fields`` to every line."""
        return _Logger(self.name, {**self.context, **fields})

    def _log(self, lvl: str, **fields):
        if LEVELS[lvl] < _current_level():
            return
        rec = {"logger": self.name}
        for k, v in {**self.context, **fields}.items():
            # reserved keys keep their meaning; caller fields get a suffix
            rec[f"{k}_" if k in RESERVED else k] = v
        print(_format(lvl, **rec), file=sys.stderr if lvl == "error" else sys.stdout)

    def debug(self, **fields):
        self._log("debug", **fields)

    def info(self, **fields):
        self._log("info", **fields)

    def warn(self, **fields):
        self._log("warn", **fields)

    def error(self, **fields):
        self._log("error", **fields)


_LOGGER_CACHE: dict[str, _Logger] = {}


def get_logger(name: str) -> _Logger:
    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = _Logger(name)
    return _LOGGER_CACHE[name]


log = get_logger("cogsuite")
