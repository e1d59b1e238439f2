import uuid

from replay_server.constants import NOT_FOUND_PAGE


def test_create_lobby_returns_uuid(client, registry):
    resp = client.post("/create_lobby", json={"lobby_id": "alpha", "mission_id": "m1"})
    assert resp.status_code == 201
    assert resp.headers["content-type"] == "application/json"
    body = resp.json()
    assert body["valid"] is True
    lobby_id = uuid.UUID(body["lobby_id"])
    assert registry.resolve("alpha") == lobby_id


def test_create_lobby_is_idempotent(client, registry):
    first = client.post("/create_lobby", json={"lobby_id": "alpha", "mission_id": "m1"}).json()
    second = client.post("/create_lobby", json={"lobby_id": "alpha", "mission_id": "m2"}).json()
    assert first["lobby_id"] == second["lobby_id"]
    assert len(registry) == 1


def test_create_lobby_rejects_non_ascii_name(client, registry):
    resp = client.post(
        "/create_lobby",
        content=b'{"lobby_id":"\\u00e9","mission_id":"m1"}',
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 201
    assert resp.json() == {"valid": False, "lobby_id": ""}
    assert len(registry) == 0


def test_create_lobby_rejects_non_ascii_mission(client, registry):
    resp = client.post("/create_lobby", json={"lobby_id": "alpha", "mission_id": "mé"})
    assert resp.status_code == 201
    assert resp.json() == {"valid": False, "lobby_id": ""}
    assert registry.resolve("alpha") is None


def test_create_lobby_rejects_empty_name(client, registry):
    resp = client.post("/create_lobby", json={"lobby_id": "", "mission_id": "m1"})
    assert resp.status_code == 201
    assert resp.json()["valid"] is False
    assert len(registry) == 0


def test_create_lobby_malformed_json(client):
    resp = client.post("/create_lobby", content=b"{not json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.content == b""


def test_create_lobby_wrong_shape(client, registry):
    resp = client.post("/create_lobby", json={"test": 42})
    assert resp.status_code == 400
    assert resp.content == b""
    assert len(registry) == 0


def test_create_lobby_wrong_field_type(client):
    resp = client.post("/create_lobby", json={"lobby_id": 5, "mission_id": "m1"})
    assert resp.status_code == 400


def test_unknown_post_path_not_implemented(client):
    resp = client.post("/start_mission", json={"lobby_id": "alpha"})
    assert resp.status_code == 501
    assert resp.content == b""


def test_unknown_post_path_with_bad_body(client):
    resp = client.post("/start_mission", content=b"garbage")
    assert resp.status_code == 400
    assert resp.content == b""


def test_get_index(client, static_root):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    assert resp.content == (static_root / "index.html").read_bytes()


def test_get_script(client, static_root):
    resp = client.get("/test.js")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("application/javascript")
    assert resp.content == (static_root / "test.js").read_bytes()


def test_get_unregistered_path(client):
    resp = client.get("/nonexistent")
    assert resp.status_code == 404
    assert resp.text == NOT_FOUND_PAGE


def test_get_create_lobby_is_not_found(client):
    assert client.get("/create_lobby").status_code == 404


def test_other_methods_are_not_found(client):
    for method in ("PUT", "DELETE", "PATCH"):
        resp = client.request(method, "/")
        assert resp.status_code == 404
        assert resp.text == NOT_FOUND_PAGE
