"""
project: Cognitive Assessment Suite
module: __init__.py
License: MIT

Flask application setup.

Wires together the Flask app and Flask-SocketIO, registers the menu and game
API blueprints, and installs JSON error handlers. Configuration is sourced
from environment variables (optionally via a `.env` file) with development
defaults. A local `instance/` directory holds the rotating log file.
"""

import logging
import os
import uuid

from dotenv import load_dotenv
from flask import Flask, jsonify
from flask_socketio import SocketIO

# Load .env if present so SECRET_KEY, MAZE_* overrides etc. can be supplied
# without exporting shell variables during development.
load_dotenv()

app = Flask(__name__, instance_relative_config=True)

try:
    os.makedirs(app.instance_path, exist_ok=True)
except OSError:
    # Read-only checkouts still work; only file logging needs the directory
    pass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes", "on")


app.config.update(
    SECRET_KEY=os.getenv("SECRET_KEY", "dev-secret-change-me"),
    # Maze generation bounds / policy
    MAZE_MAX_ATTEMPTS=int(os.getenv("MAZE_MAX_ATTEMPTS", "500")),
    MAZE_WALL_PLACEMENT_TRIES=int(os.getenv("MAZE_WALL_PLACEMENT_TRIES", "100")),
    MAZE_STRICT_GENERATION=_env_flag("MAZE_STRICT_GENERATION", "0"),
    # Countdown timers (Socket.IO background tasks)
    GAME_TIMERS_ENABLED=_env_flag("GAME_TIMERS_ENABLED", "1"),
    BUBBLE_QUESTION_SECONDS=int(os.getenv("BUBBLE_QUESTION_SECONDS", "15")),
    BUBBLE_QUESTIONS_PER_SECTION=int(os.getenv("BUBBLE_QUESTIONS_PER_SECTION", "2")),
)

# Let Flask-SocketIO select best async_mode based on installed deps (eventlet/gevent/threading)
socketio = SocketIO(
    app,
    async_mode=os.getenv("SOCKETIO_ASYNC_MODE") or None,
    cors_allowed_origins=os.getenv("CORS_ALLOWED_ORIGINS", "*"),
    engineio_logger=_env_flag("ENGINEIO_LOGGER", "0"),
    ping_interval=20,
    ping_timeout=10,
)

# Register HTTP blueprints (after app/socketio exist; routes import socketio via timers)
from cogsuite.routes.bubble_api import bp_bubble  # noqa: E402
from cogsuite.routes.main import bp  # noqa: E402
from cogsuite.routes.maze_api import bp_maze  # noqa: E402
from cogsuite.routes.path_api import bp_path  # noqa: E402

app.register_blueprint(bp)
app.register_blueprint(bp_maze)
app.register_blueprint(bp_path)
app.register_blueprint(bp_bubble)

# Import websocket handlers so their event decorators register with Socket.IO (side-effect)
from cogsuite.websockets import game as _ws_game  # noqa: F401,E402

from cogsuite.games.errors import GameError  # noqa: E402


def create_app():
    """Return the configured Flask app instance."""
    return app


@app.errorhandler(GameError)
def game_error(e: GameError):
    return jsonify(e.to_dict()), e.status


@app.errorhandler(404)
def not_found(e):
    return jsonify({"error": "not found", "code": "not_found"}), 404


# In non-debug mode, return a short JSON error with an id to grep the log for
@app.errorhandler(500)
def internal_error(e):
    error_id = uuid.uuid4().hex[:8]
    logging.exception("Unhandled exception (id=%s)", error_id)
    return jsonify({"error": "internal error", "code": "internal", "error_id": error_id}), 500
