"""
project: Cognitive Assessment Suite
module: bubble_api.py
License: MIT

Numerical sort endpoints. A new session starts on the intro screen; the
client advances through the info screens and selects bubbles in order.
"""

from flask import Blueprint, jsonify

from cogsuite.sessions.events import Advance, SelectBubble
from cogsuite.websockets.validation import BUBBLE_SELECT

from .helpers import apply, current_session, exit_session, payload, request_seed, start_session, state_response

bp_bubble = Blueprint("bubble_api", __name__, url_prefix="/api/bubble")


@bp_bubble.route("/start", methods=["POST"])
def start():
    sess = start_session("bubble", None)
    sess.reseed(request_seed())
    return state_response(sess, 201)


@bp_bubble.route("/advance", methods=["POST"])
def advance():
    return apply("bubble", Advance())


@bp_bubble.route("/select", methods=["POST"])
def select():
    body = payload(BUBBLE_SELECT)
    return apply("bubble", SelectBubble(body["bubble_id"]))


@bp_bubble.route("/summary")
def summary():
    return jsonify(current_session("bubble").summary())


@bp_bubble.route("/state")
def state():
    return state_response(current_session("bubble"))


@bp_bubble.route("/exit", methods=["POST"])
def exit_game():
    return exit_session("bubble")
