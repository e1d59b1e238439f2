"""Shared fixtures: an application wired to a temporary static root."""

import pytest
from fastapi.testclient import TestClient

from replay_server.app import create_app
from replay_server.config import Settings
from replay_server.registry import LobbyRegistry

INDEX_HTML = b"<!DOCTYPE html><html><body>replay</body></html>"
TEST_JS = b"function createLobby() {}"


@pytest.fixture
def static_root(tmp_path):
    (tmp_path / "index.html").write_bytes(INDEX_HTML)
    (tmp_path / "test.js").write_bytes(TEST_JS)
    return tmp_path


@pytest.fixture
def settings(static_root):
    return Settings(static_root=str(static_root), stream_interval_ms=10)


@pytest.fixture
def registry():
    return LobbyRegistry()


@pytest.fixture
def app(settings, registry):
    return create_app(settings, registry=registry)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
