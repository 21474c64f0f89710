def _events(c, name):
    return [e["args"][0] for e in c.get_received() if e["name"] == name]


def test_action_without_session_reports_error(connect_socket):
    c = connect_socket()
    c.emit("game_action", {"game": "maze", "action": "move", "dir": "up"})
    errors = _events(c, "error")
    assert errors and errors[0]["code"] == "not_found"


def test_invalid_payload(connect_socket):
    c = connect_socket()
    c.emit("join_session", {"game": "chess"})
    errors = _events(c, "error")
    assert errors[0]["field"] == "game" and errors[0]["code"] == "choices"


def test_join_and_move(client, connect_socket):
    client.post("/api/maze/start", json={"seed": 1})
    c = connect_socket()
    c.emit("join_session", {"game": "maze"})
    received = c.get_received()
    names = [e["name"] for e in received]
    assert "status" in names and "game_update" in names
    c.emit("game_action", {"game": "maze", "action": "move", "dir": "up"})
    updates = _events(c, "game_update")
    assert len(updates) == 1
    assert updates[0]["transition"]["outcome"] in ("moved", "blocked")
    assert updates[0]["state"]["game"] == "maze"


def test_rejected_action_emits_error(client, connect_socket):
    client.post("/api/path/start", json={})
    c = connect_socket()
    c.emit("game_action", {"game": "path", "action": "rotate"})
    errors = _events(c, "error")
    assert errors[0]["code"] == "no_selection"
    c.emit("game_action", {"game": "path", "action": "fly"})
    assert _events(c, "error")[0]["code"] == "unknown_action"


def test_room_members_see_updates(client, test_app, connect_socket):
    from cogsuite import socketio

    client.post("/api/bubble/start", json={})
    actor = connect_socket()
    watcher = socketio.test_client(test_app, flask_test_client=client)
    try:
        watcher.emit("join_session", {"game": "bubble"})
        watcher.get_received()
        actor.emit("game_action", {"game": "bubble", "action": "advance"})
        assert _events(actor, "game_update")[0]["state"]["phase"] == "practice_info"
        assert _events(watcher, "game_update")[0]["state"]["phase"] == "practice_info"
    finally:
        watcher.disconnect()


def test_exit_action_drops_session(client, connect_socket):
    from cogsuite.sessions.registry import registry

    client.post("/api/maze/start", json={"seed": 1, "mode": "challenge"})
    with client.session_transaction() as flask_session:
        pid = flask_session["player_id"]
    sess = registry.get(pid, "maze")
    c = connect_socket()
    c.emit("join_session", {"game": "maze"})
    c.get_received()
    c.emit("game_action", {"game": "maze", "action": "exit"})
    status = _events(c, "status")
    assert status and status[0]["msg"] == "exited"
    assert sess.closed
    assert registry.get(pid, "maze") is None
    c.emit("game_action", {"game": "maze", "action": "move", "dir": "up"})
    assert _events(c, "error")[0]["code"] == "not_found"
