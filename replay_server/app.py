from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings
from .registry import LobbyRegistry
from .routers import assets as assets_router
from .routers import lobbies as lobbies_router
from .routers import websockets as ws_router
from .state import install_state
from .static import StaticAssetResponder, default_responder

logger = logging.getLogger(__name__)

# -----------------------------
# FastAPI app factory
# -----------------------------


def create_app(
    settings: Optional[Settings] = None,
    registry: Optional[LobbyRegistry] = None,
    static: Optional[StaticAssetResponder] = None,
) -> FastAPI:
    if settings is None:
        settings = Settings()

    # The catch-all asset routes own every GET path, including the ones
    # FastAPI would otherwise use for its docs.
    app = FastAPI(title="Mission Replay Server", docs_url=None, redoc_url=None, openapi_url=None)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    install_state(
        app,
        settings=settings,
        registry=registry if registry is not None else LobbyRegistry(),
        static=static if static is not None else default_responder(settings.static_root),
    )

    # Order matters: the assets router matches every path.
    app.include_router(lobbies_router.router)
    app.include_router(ws_router.router)
    app.include_router(assets_router.router)

    logger.debug("Application created with static root %s", settings.static_root)
    return app


app = create_app()

__all__ = ["app", "create_app"]
