"""
project: Cognitive Assessment Suite
module: main.py
License: MIT

Game menu and static configuration endpoints.
"""

from flask import Blueprint, jsonify

from cogsuite.games.config import levels_payload

bp = Blueprint("main", __name__)

GAMES = [
    {
        "id": "maze",
        "title": "Invisible Maze",
        "subtitle": "Spatial memory",
        "blurb": "Find the key, then the door. Walls only show up when you walk into them.",
        "endpoint": "/api/maze",
    },
    {
        "id": "path",
        "title": "Arrow Path",
        "subtitle": "Planning",
        "blurb": "Rotate and swap tiles until a path connects the left edge to the right edge.",
        "endpoint": "/api/path",
    },
    {
        "id": "bubble",
        "title": "Numerical Sort",
        "subtitle": "Working memory",
        "blurb": "Pick the bubbles from the smallest value to the largest before time runs out.",
        "endpoint": "/api/bubble",
    },
]


@bp.route("/")
def index():
    return jsonify({"name": "Cognitive Assessment Suite", "games": GAMES})


@bp.route("/api/games")
def games():
    return jsonify(GAMES)


@bp.route("/api/config/levels")
def levels():
    return jsonify(levels_payload())
