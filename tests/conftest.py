import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from cogsuite import create_app, socketio  # noqa: E402
from cogsuite.sessions import timers  # noqa: E402
from cogsuite.sessions.registry import registry  # noqa: E402


@pytest.fixture(scope="session")
def test_app():
    app = create_app()
    app.config.update({"TESTING": True, "GAME_TIMERS_ENABLED": False})
    return app


@pytest.fixture(autouse=True)
def _push_app_context(test_app):
    ctx = test_app.app_context()
    ctx.push()
    try:
        yield
    finally:
        ctx.pop()


@pytest.fixture()
def client(test_app):
    return test_app.test_client()


@pytest.fixture()
def connect_socket(test_app, client):
    """Return a connect() that opens a Socket.IO client sharing ``client``'s session.

    The Flask session is copied at connect time, so start a game over HTTP first.
    """
    opened = []

    def connect():
        c = socketio.test_client(test_app, flask_test_client=client)
        c.get_received()
        opened.append(c)
        return c

    yield connect
    for c in opened:
        if c.is_connected():
            c.disconnect()


@pytest.fixture(autouse=True)
def _clear_session_state():
    """Live sessions and countdown bookkeeping must not leak between tests."""
    registry.clear()
    timers._running.clear()
    yield
    registry.clear()
    timers._running.clear()


class FakeSleep:
    """Stand-in for socketio.sleep that records calls and can fire a hook."""

    def __init__(self, hook=None, limit=1000):
        self.calls = 0
        self.hook = hook
        self.limit = limit

    def __call__(self, seconds):
        self.calls += 1
        if self.calls > self.limit:
            raise RuntimeError("countdown did not stop")
        if self.hook:
            self.hook(self.calls)


@pytest.fixture()
def fake_sleep():
    return FakeSleep
