from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import Response
from pydantic import ValidationError

from ..registry import LobbyRegistry
from ..responses import Result, Success, empty_response
from ..schemas import CreateLobbyRequest, LobbyCreated
from ..state import get_registry

logger = logging.getLogger(__name__)

router = APIRouter(prefix="", tags=["lobbies"])


def create_lobby_result(req: CreateLobbyRequest, registry: LobbyRegistry) -> Result:
    """Validate *req* and create (or reuse) the named lobby.

    Validation failures are reported inside the payload; the status is 201
    either way.
    """
    created = LobbyCreated()
    if req.lobby_id and req.lobby_id.isascii() and req.mission_id.isascii():
        identifier = registry.create_or_get(req.lobby_id, mission_id=req.mission_id)
        created = LobbyCreated(valid=True, lobby_id=str(identifier))
    logger.info("New lobby request: %s || %s", req, created)
    return Success(created, status_code=status.HTTP_201_CREATED)


@router.post("/create_lobby")
async def create_lobby(request: Request, registry: LobbyRegistry = Depends(get_registry)) -> Response:
    body = await request.body()
    try:
        req = CreateLobbyRequest.model_validate_json(body)
    except ValidationError as exc:
        logger.warning("Cannot parse request params: %s", exc.errors(include_url=False))
        return empty_response(status.HTTP_400_BAD_REQUEST)
    return create_lobby_result(req, registry).to_response()


__all__ = ["router", "create_lobby_result"]
