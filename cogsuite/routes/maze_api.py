"""
project: Cognitive Assessment Suite
module: maze_api.py
License: MIT

Invisible maze endpoints. One live maze per player; starting again replaces it.
"""

from flask import Blueprint

from cogsuite.sessions.events import Move, NextLevel, Retry, StartMaze
from cogsuite.websockets.validation import MAZE_MOVE, MAZE_START

from .helpers import apply, current_session, exit_session, payload, request_seed, start_session, state_response

bp_maze = Blueprint("maze_api", __name__, url_prefix="/api/maze")


@bp_maze.route("/start", methods=["POST"])
def start():
    body = payload(MAZE_START)
    sess = start_session("maze", StartMaze(level_index=body["level"], mode=body["mode"], seed=request_seed()))
    return state_response(sess, 201)


@bp_maze.route("/move", methods=["POST"])
def move():
    body = payload(MAZE_MOVE)
    return apply("maze", Move(body["dir"]))


@bp_maze.route("/retry", methods=["POST"])
def retry():
    return apply("maze", Retry())


@bp_maze.route("/next", methods=["POST"])
def next_level():
    return apply("maze", NextLevel())


@bp_maze.route("/state")
def state():
    return state_response(current_session("maze"))


@bp_maze.route("/exit", methods=["POST"])
def exit_game():
    return exit_session("maze")
