"""Shared request helpers for the game blueprints."""

import hashlib
import random
import uuid

from flask import abort, jsonify, request, session

from cogsuite.games.errors import GameError
from cogsuite.sessions.registry import SESSION_TYPES, registry
from cogsuite.sessions.timers import start_countdown
from cogsuite.websockets.validation import validate

MAX_SEED = 2**63 - 1


def player_id() -> str:
    """Return the caller's player id, minting one into the Flask session."""
    pid = session.get("player_id")
    if not pid:
        pid = uuid.uuid4().hex
        session["player_id"] = pid
    return pid


def coerce_seed(payload_seed):
    """Convert a provided seed (int or str) into a bounded int; None stays None."""
    if payload_seed is None or isinstance(payload_seed, bool):
        return None
    if isinstance(payload_seed, int):
        return payload_seed % MAX_SEED
    if isinstance(payload_seed, str):
        s = payload_seed.strip()
        if not s:
            return None
        if s.isdigit():
            return int(s) % MAX_SEED
        h = hashlib.sha256(s.encode("utf-8")).digest()
        return int.from_bytes(h[:8], "big") % MAX_SEED
    return random.randint(1, 1_000_000)


def payload(schema) -> dict:
    data = request.get_json(silent=True) or {}
    ok, result = validate(data, schema)
    if not ok:
        raise GameError(f"{result['field']}: {result['error']}", code=result["code"])
    return result


def current_session(game: str):
    pid = session.get("player_id")
    sess = registry.get(pid, game) if pid else None
    if sess is None:
        abort(404)
    return sess


def start_session(game: str, start_event):
    """Create a fresh session for the caller, apply ``start_event``, start its timer."""
    sess = SESSION_TYPES[game]()
    if start_event is not None:
        sess.dispatch(start_event)
    registry.replace(player_id(), game, sess)
    start_countdown(sess)
    return sess


def apply(game: str, event):
    """Dispatch ``event`` on the caller's session and return the JSON response."""
    sess = current_session(game)
    before = sess.generation
    transition = sess.dispatch(event)
    if sess.generation != before:
        start_countdown(sess)
    return jsonify({"transition": transition.to_dict(), "state": sess.snapshot()})


def request_seed():
    """Seed from the JSON body, if the client supplied one."""
    data = request.get_json(silent=True) or {}
    return coerce_seed(data.get("seed")) if isinstance(data, dict) else None


def state_response(sess, status: int = 200):
    return jsonify({"session_id": sess.id, "state": sess.snapshot()}), status


def exit_session(game: str):
    """Drop the caller's session; its countdown stops at the next tick."""
    sess = current_session(game)
    registry.drop(session["player_id"], game)
    return jsonify({"session_id": sess.id, "exited": True})
