"""Static asset responder.

Assets are registered by URL path at startup and never change afterwards,
so the responder is shared across connections without locking. Disk-backed
assets are read on every request; a missing or unreadable file degrades to
the 404 page.
"""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Union

from fastapi.responses import HTMLResponse, Response

from .constants import CONTENT_TYPE_HTML, CONTENT_TYPE_JAVASCRIPT, NOT_FOUND_PAGE

logger = logging.getLogger(__name__)


class AssetKind(enum.Enum):
    HTML = CONTENT_TYPE_HTML
    JAVASCRIPT = CONTENT_TYPE_JAVASCRIPT

    @property
    def content_type(self) -> str:
        return self.value


@dataclass(frozen=True)
class StaticAsset:
    """Either a file under the responder root (*path*) or in-memory *data*."""

    kind: AssetKind
    path: Optional[str] = None
    data: Optional[bytes] = None

    def __post_init__(self) -> None:
        if (self.path is None) == (self.data is None):
            raise ValueError("StaticAsset needs exactly one of path or data")


class StaticAssetResponder:
    def __init__(self, root: Union[str, Path]):
        self.root = Path(root)
        self._assets: Dict[str, StaticAsset] = {}

    def register(self, url_path: str, asset: StaticAsset) -> None:
        self._assets[url_path] = asset

    def registered_paths(self) -> List[str]:
        return sorted(self._assets)

    def serve_404(self) -> HTMLResponse:
        return HTMLResponse(NOT_FOUND_PAGE, status_code=404)

    def serve(self, url_path: str) -> Response:
        asset = self._assets.get(url_path)
        if asset is None:
            logger.debug("No static asset registered for %s", url_path)
            return self.serve_404()

        if asset.data is not None:
            body = asset.data
        else:
            file_path = self.root / asset.path
            try:
                body = file_path.read_bytes()
            except OSError as exc:
                logger.warning("Cannot serve %s (%s): %s", url_path, file_path, exc)
                return self.serve_404()

        return Response(content=body, status_code=200, media_type=asset.kind.content_type)


def default_responder(root: Union[str, Path]) -> StaticAssetResponder:
    """Responder with the bundled spectator page and its script."""
    responder = StaticAssetResponder(root)
    responder.register("/", StaticAsset(AssetKind.HTML, path="index.html"))
    responder.register("/test.js", StaticAsset(AssetKind.JAVASCRIPT, path="test.js"))
    return responder


__all__ = ["AssetKind", "StaticAsset", "StaticAssetResponder", "default_responder"]
