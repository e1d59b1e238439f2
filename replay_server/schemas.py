"""Pydantic data schemas used across the replay server.

Request bodies, response payloads and the frames pushed to spectators all
live here so the routers and the streaming loop share one definition.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict

# -----------------------------
# REST request / response models
# -----------------------------


class CreateLobbyRequest(BaseModel):
    """Body of ``POST /create_lobby``.

    ``lobby_id`` is the human-chosen lobby name (or an existing identifier).
    """

    model_config = ConfigDict(strict=True)

    lobby_id: str
    mission_id: str


class LobbyCreated(BaseModel):
    valid: bool = False
    lobby_id: str = ""


class FailedConnection(BaseModel):
    """Gateway-level failure envelope."""

    valid: bool = False
    message: str


# -----------------------------
# Streaming
# -----------------------------


class SessionUpdate(BaseModel):
    """One frame pushed to a spectator."""

    type: str = "tick"
    lobby_id: str = ""
    mission_id: Optional[str] = None
    elapsed_ms: int
    payload: Dict[str, Any] = {}


__all__ = [
    "CreateLobbyRequest",
    "LobbyCreated",
    "FailedConnection",
    "SessionUpdate",
]
