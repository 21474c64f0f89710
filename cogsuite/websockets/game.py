"""Socket.IO game handlers.

Events:
    - join_session: Join the room of the caller's live session; payload { game }
    - leave_session: Leave that room; payload { game }
    - game_action: Apply an action to the caller's session; payload { game, action, ... }

Emits:
    - status: Room membership updates (join/leave)
    - game_update: { transition, state } after every applied action
    - timer_update: { game, time_left, outcome } once per countdown second (see sessions.timers)
    - error: { message, field, code } for invalid payloads or rejected actions
"""

from flask import request, session
from flask_socketio import emit, join_room, leave_room

from cogsuite import socketio
from cogsuite.games.errors import GameError
from cogsuite.logging_utils import get_logger
from cogsuite.sessions.events import build_event
from cogsuite.sessions.registry import registry
from cogsuite.sessions.timers import start_countdown

from .validation import GAME_ACTION, JOIN_SESSION, LEAVE_SESSION, validate

_log = get_logger("cogsuite.ws")

# room -> set of sids, for diagnostics
active_rooms = {}


def _invalid(event, result):
    emit('error', {'message': f"Invalid {event}: {result['error']}", 'field': result['field'], 'code': result['code']})


def _live_session(game):
    pid = session.get('player_id')
    sess = registry.get(pid, game) if pid else None
    if sess is None:
        emit('error', {'message': f'no active {game} session', 'field': 'game', 'code': 'not_found'})
    return sess


def _exit(sess):
    registry.drop(session.get('player_id'), sess.game)
    leave_room(sess.room)
    members = active_rooms.get(sess.room)
    if members is not None:
        members.discard(request.sid)
        if not members:
            active_rooms.pop(sess.room, None)
    emit('status', {'msg': 'exited', 'room': sess.room, 'game': sess.game})
    emit('status', {'msg': 'exited', 'room': sess.room, 'game': sess.game}, to=sess.room)
    _log.info(event="game_exit", room=sess.room, game=sess.game)


@socketio.on('join_session')
def handle_join_session(data):
    ok, result = validate(data or {}, JOIN_SESSION)
    if not ok:
        _invalid('join_session', result)
        return
    sess = _live_session(result['game'])
    if sess is None:
        return
    join_room(sess.room)
    active_rooms.setdefault(sess.room, set()).add(request.sid)
    emit('status', {'msg': 'joined', 'room': sess.room, 'game': sess.game})
    emit('game_update', {'transition': None, 'state': sess.snapshot()})
    _log.info(event="join_session", room=sess.room, members=len(active_rooms[sess.room]))


@socketio.on('leave_session')
def handle_leave_session(data):
    ok, result = validate(data or {}, LEAVE_SESSION)
    if not ok:
        _invalid('leave_session', result)
        return
    sess = _live_session(result['game'])
    if sess is None:
        return
    leave_room(sess.room)
    members = active_rooms.get(sess.room)
    if members is not None:
        members.discard(request.sid)
        if not members:
            active_rooms.pop(sess.room, None)
    emit('status', {'msg': 'left', 'room': sess.room, 'game': sess.game})
    _log.info(event="leave_session", room=sess.room)


@socketio.on('game_action')
def handle_game_action(data):
    ok, result = validate(data or {}, GAME_ACTION)
    if not ok:
        _invalid('game_action', result)
        return
    game, action = result['game'], result['action']
    sess = _live_session(game)
    if sess is None:
        return
    if action == 'exit':
        _exit(sess)
        return
    try:
        event = build_event(game, action, data)
        before = sess.generation
        transition = sess.dispatch(event)
    except GameError as e:
        emit('error', {'message': e.message, 'field': 'action', 'code': e.code})
        _log.warn(event="game_action_rejected", game=game, action=action, code=e.code)
        return
    if sess.generation != before:
        start_countdown(sess)
    update = {'transition': transition.to_dict(), 'state': sess.snapshot()}
    # sender always gets the update, even before join_session
    emit('game_update', update)
    emit('game_update', update, to=sess.room, include_self=False)
    _log.info(event="game_action", game=game, action=action, outcome=transition.outcome)
