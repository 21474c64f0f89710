"""Runtime setting lookup for the session layer.

Precedence: Flask ``current_app.config`` (when an app context is active),
then environment variables, then the caller's default.
"""
from __future__ import annotations

import os
from typing import Any, Callable

from flask import current_app, has_app_context

_FALSY = {"0", "false", "no", "off", ""}


def as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() not in _FALSY
    return bool(value)


def get_setting(name: str, default: Any, cast: Callable[[Any], Any] = lambda v: v) -> Any:
    if has_app_context() and name in current_app.config:
        return cast(current_app.config[name])
    if name in os.environ:
        return cast(os.environ[name])
    return default
