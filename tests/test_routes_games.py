from cogsuite.games.errors import MazeGenerationExhausted


def _start_maze(client, **body):
    resp = client.post("/api/maze/start", json={"level": 0, "mode": "practice", "seed": 5, **body})
    assert resp.status_code == 201, resp.get_json()
    return resp.get_json()


def test_maze_start_and_state(client):
    data = _start_maze(client)
    state = data["state"]
    assert state["status"] == "active"
    assert state["grid_size"] == 3
    assert "walls" not in state
    again = client.get("/api/maze/state").get_json()
    assert again["session_id"] == data["session_id"]


def test_maze_seed_is_reproducible(client, test_app):
    a = _start_maze(client, seed="daily-7")["state"]
    other = test_app.test_client()
    resp = other.post("/api/maze/start", json={"level": 0, "seed": "daily-7"})
    b = resp.get_json()["state"]
    assert (a["key"], a["door"]) == (b["key"], b["door"])


def test_maze_move(client):
    _start_maze(client)
    resp = client.post("/api/maze/move", json={"dir": "up"})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["transition"]["outcome"] in ("moved", "blocked", "won")
    assert body["state"]["player"]["position"] in ([1, 0], [2, 0])


def test_maze_move_errors(client):
    assert client.post("/api/maze/move", json={"dir": "up"}).status_code == 404
    _start_maze(client)
    resp = client.post("/api/maze/move", json={})
    assert resp.status_code == 400 and resp.get_json()["code"] == "required"
    resp = client.post("/api/maze/move", json={"dir": "sideways"})
    assert resp.status_code == 400 and resp.get_json()["code"] == "bad_direction"
    resp = client.post("/api/maze/next")
    assert resp.status_code == 409 and resp.get_json()["code"] == "invalid_action"


def test_maze_bad_start_keeps_previous_session(client):
    first = _start_maze(client)["session_id"]
    resp = client.post("/api/maze/start", json={"level": 7})
    assert resp.status_code == 400 and resp.get_json()["code"] == "bad_level"
    resp = client.post("/api/maze/start", json={"mode": "speedrun"})
    assert resp.status_code == 400 and resp.get_json()["code"] == "choices"
    assert client.get("/api/maze/state").get_json()["session_id"] == first


def test_maze_retry_bumps_generation(client):
    gen = _start_maze(client)["state"]["generation"]
    body = client.post("/api/maze/retry").get_json()
    assert body["transition"]["outcome"] == "started"
    assert body["state"]["generation"] > gen


def test_maze_exhaustion_is_503(client, monkeypatch):
    def boom(grid_size, wall_count, **kw):
        raise MazeGenerationExhausted(grid_size, wall_count, 1)

    monkeypatch.setattr("cogsuite.sessions.maze_session.generate_playable_maze", boom)
    resp = client.post("/api/maze/start", json={})
    assert resp.status_code == 503
    assert resp.get_json()["code"] == "maze_ungenerable"


def test_path_flow(client):
    resp = client.post("/api/path/start", json={"mode": "practice", "seed": 3})
    assert resp.status_code == 201
    state = resp.get_json()["state"]
    assert state["grid"]["size"] == 3 and state["time_left"] is None
    resp = client.post("/api/path/rotate")
    assert resp.status_code == 409 and resp.get_json()["code"] == "no_selection"
    assert client.post("/api/path/select", json={"tile_id": "0-0"}).status_code == 200
    body = client.post("/api/path/rotate").get_json()
    assert body["transition"]["outcome"] == "rotated"
    assert body["state"]["moves"] == 1
    resp = client.post("/api/path/select", json={"tile_id": "7-7"})
    assert resp.status_code == 400 and resp.get_json()["code"] == "unknown_tile"
    body = client.post("/api/path/check").get_json()
    assert body["transition"]["outcome"] in ("success", "no-start-connection", "no-path")


def test_path_assessment_is_timed(client):
    state = client.post("/api/path/start", json={"mode": "assessment"}).get_json()["state"]
    assert state["level"] == 2
    assert state["time_left"] == 60


def test_bubble_flow(client):
    state = client.post("/api/bubble/start", json={"seed": 9}).get_json()["state"]
    assert state["phase"] == "intro"
    client.post("/api/bubble/advance")
    state = client.post("/api/bubble/advance").get_json()["state"]
    assert state["phase"] == "practice"
    assert all("value" not in b for b in state["bubbles"])
    resp = client.post("/api/bubble/select", json={"bubble_id": "1"})
    assert resp.status_code == 400 and resp.get_json()["code"] == "type"
    body = client.post("/api/bubble/select", json={"bubble_id": state["bubbles"][0]["id"]}).get_json()
    assert body["transition"]["outcome"] == "selected"
    summary = client.get("/api/bubble/summary").get_json()
    assert summary == {"answered": 0, "correct": 0, "timed_out": 0, "total": 0}


def test_players_are_isolated(client, test_app):
    _start_maze(client)
    other = test_app.test_client()
    assert other.get("/api/maze/state").status_code == 404


def test_exit_stops_countdown_and_drops_session(client, fake_sleep, monkeypatch):
    from cogsuite import socketio
    from cogsuite.sessions import timers
    from cogsuite.sessions.registry import registry

    monkeypatch.setattr(socketio, "emit", lambda *a, **kw: None)
    data = _start_maze(client, mode="challenge")
    with client.session_transaction() as flask_session:
        pid = flask_session["player_id"]
    sess = registry.get(pid, "maze")
    gen = sess.generation
    resp = client.post("/api/maze/exit")
    assert resp.status_code == 200
    assert resp.get_json() == {"session_id": data["session_id"], "exited": True}
    assert sess.closed
    assert timers.run_countdown(sess, gen, sleep=fake_sleep()) == 0
    assert client.get("/api/maze/state").status_code == 404
    assert client.post("/api/maze/exit").status_code == 404


def test_exit_only_drops_named_game(client):
    client.post("/api/path/start", json={})
    client.post("/api/bubble/start", json={})
    assert client.post("/api/path/exit").status_code == 200
    assert client.get("/api/path/state").status_code == 404
    assert client.get("/api/bubble/state").status_code == 200
