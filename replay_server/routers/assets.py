"""Fallback HTTP routes.

Included last so ``/create_lobby`` and the websocket route match first.
"""
from __future__ import annotations

import json
import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import Response

from ..responses import empty_response
from ..static import StaticAssetResponder
from ..state import get_static

logger = logging.getLogger(__name__)

router = APIRouter(prefix="", tags=["assets"])

OTHER_METHODS = ["PUT", "DELETE", "PATCH", "OPTIONS", "HEAD", "TRACE"]


@router.get("/{path:path}")
async def serve_asset(path: str, static: StaticAssetResponder = Depends(get_static)) -> Response:
    return static.serve("/" + path)


@router.post("/{path:path}")
async def unknown_post(path: str, request: Request) -> Response:
    body = await request.body()
    try:
        json.loads(body)
    except ValueError as exc:
        logger.warning("Cannot parse request params for /%s: %s", path, exc)
        return empty_response(status.HTTP_400_BAD_REQUEST)
    return empty_response(status.HTTP_501_NOT_IMPLEMENTED)


@router.api_route("/{path:path}", methods=OTHER_METHODS)
async def unsupported_method(path: str, static: StaticAssetResponder = Depends(get_static)) -> Response:
    return static.serve_404()


__all__ = ["router", "OTHER_METHODS"]
