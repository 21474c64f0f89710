"""
project: Cognitive Assessment Suite
module: path_api.py
License: MIT

Arrow path puzzle endpoints.
"""

from flask import Blueprint

from cogsuite.sessions.events import CheckPath, NextPuzzle, Retry, Retype, Rotate, SelectTile, StartPath
from cogsuite.websockets.validation import PATH_SELECT, PATH_START

from .helpers import apply, current_session, exit_session, payload, request_seed, start_session, state_response

bp_path = Blueprint("path_api", __name__, url_prefix="/api/path")


@bp_path.route("/start", methods=["POST"])
def start():
    body = payload(PATH_START)
    sess = start_session("path", StartPath(mode=body["mode"], seed=request_seed()))
    return state_response(sess, 201)


@bp_path.route("/select", methods=["POST"])
def select():
    body = payload(PATH_SELECT)
    return apply("path", SelectTile(body["tile_id"]))


@bp_path.route("/rotate", methods=["POST"])
def rotate():
    return apply("path", Rotate())


@bp_path.route("/retype", methods=["POST"])
def retype():
    return apply("path", Retype())


@bp_path.route("/check", methods=["POST"])
def check():
    return apply("path", CheckPath())


@bp_path.route("/next", methods=["POST"])
def next_puzzle():
    return apply("path", NextPuzzle())


@bp_path.route("/retry", methods=["POST"])
def retry():
    return apply("path", Retry())


@bp_path.route("/state")
def state():
    return state_response(current_session("path"))


@bp_path.route("/exit", methods=["POST"])
def exit_game():
    return exit_session("path")
