"""Centralised runtime state.

The registry, the static responder and the settings are created once per
application and stored on ``app.state``. Routers reach them through the
dependency helpers below, which work for both HTTP and websocket scopes.
"""
from __future__ import annotations

from fastapi import FastAPI
from starlette.requests import HTTPConnection

from .config import Settings
from .registry import LobbyRegistry
from .static import StaticAssetResponder


def install_state(app: FastAPI, settings: Settings, registry: LobbyRegistry, static: StaticAssetResponder) -> None:
    app.state.settings = settings
    app.state.registry = registry
    app.state.static = static


def get_settings(conn: HTTPConnection) -> Settings:
    return conn.app.state.settings


def get_registry(conn: HTTPConnection) -> LobbyRegistry:
    return conn.app.state.registry


def get_static(conn: HTTPConnection) -> StaticAssetResponder:
    return conn.app.state.static


__all__ = ["install_state", "get_settings", "get_registry", "get_static"]
