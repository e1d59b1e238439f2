from __future__ import annotations

import logging
import uuid
from typing import Union

from fastapi import APIRouter, Depends, WebSocket, status

from ..config import Settings
from ..constants import LOBBY_QUERY_KEY, MSG_BAD_QUERY, MSG_NO_QUERY, MSG_UNKNOWN_LOBBY
from ..query import parse_query
from ..registry import LobbyRegistry
from ..responses import ClientError
from ..state import get_registry, get_settings
from ..streaming import SpectatorStream

logger = logging.getLogger(__name__)

router = APIRouter(prefix="", tags=["ws"])


def gate_upgrade(raw_query: str, registry: LobbyRegistry) -> Union[uuid.UUID, ClientError]:
    """Decide whether an upgrade request may proceed.

    Returns the resolved lobby identifier, or the client error to answer
    with instead of completing the handshake.
    """
    if not raw_query:
        return ClientError(MSG_NO_QUERY)

    queries = parse_query(raw_query)
    lobby_key = queries.get(LOBBY_QUERY_KEY)
    if lobby_key is None:
        return ClientError(MSG_BAD_QUERY)

    lobby_id = registry.resolve(lobby_key)
    if lobby_id is None:
        return ClientError(MSG_UNKNOWN_LOBBY)
    return lobby_id


async def reject(ws: WebSocket, error: ClientError) -> None:
    """Answer the upgrade request with a plain HTTP error, never accepting it."""
    try:
        await ws.send_denial_response(error.to_response())
    except RuntimeError:
        # Server lacks the websocket.http.response extension; closing before
        # accept still refuses the handshake (as a bare 403).
        logger.warning("Denial responses unsupported, closing upgrade: %s", error.message)
        await ws.close(code=status.WS_1008_POLICY_VIOLATION)


@router.websocket("/{path:path}")
async def spectator_ws_endpoint(
    ws: WebSocket,
    path: str,
    registry: LobbyRegistry = Depends(get_registry),
    settings: Settings = Depends(get_settings),
):
    raw_query = ws.scope.get("query_string", b"").decode("latin-1")
    outcome = gate_upgrade(raw_query, registry)
    if isinstance(outcome, ClientError):
        logger.debug("Rejected upgrade on /%s: %s", path, outcome.message)
        await reject(ws, outcome)
        return

    session = registry.session_for(outcome)
    if session is None:
        # Released between resolve and here.
        await reject(ws, ClientError(MSG_UNKNOWN_LOBBY))
        return

    await SpectatorStream(ws, outcome, session, settings.stream_interval).run()


__all__ = ["router", "gate_upgrade", "reject"]
