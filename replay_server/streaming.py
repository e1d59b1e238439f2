"""Per-connection spectator stream.

Once the upgrade is accepted the stream pushes the lobby's session state at
a fixed cadence until the peer goes away. A reader task runs alongside the
pusher purely to notice the close frame, so a disconnect ends the loop
without waiting for the next failed write.
"""
from __future__ import annotations

import enum
import logging
import uuid

import anyio
from fastapi import WebSocket, WebSocketDisconnect

from .session import SessionRecord

logger = logging.getLogger(__name__)

# Raised by the ASGI servers / Starlette when writing to a closed socket.
SEND_ERRORS = (WebSocketDisconnect, RuntimeError, OSError)


class StreamState(enum.Enum):
    AWAITING_HANDSHAKE = "awaiting_handshake"
    STREAMING = "streaming"
    CLOSED = "closed"


class SpectatorStream:
    def __init__(self, ws: WebSocket, lobby_id: uuid.UUID, session: SessionRecord, interval: float):
        self.ws = ws
        self.lobby_id = lobby_id
        self.session = session
        self.interval = interval
        self.state = StreamState.AWAITING_HANDSHAKE
        self.sent = 0

    async def run(self) -> None:
        await self.ws.accept()
        self.state = StreamState.STREAMING
        logger.info("Spectator joined lobby %s", self.lobby_id)

        try:
            async with anyio.create_task_group() as tg:

                async def stop_when_done(step) -> None:
                    await step()
                    tg.cancel_scope.cancel()

                tg.start_soon(stop_when_done, self._push_updates)
                tg.start_soon(stop_when_done, self._wait_for_close)
        except Exception:
            logger.exception("Stream for lobby %s failed", self.lobby_id)
            raise
        finally:
            self.state = StreamState.CLOSED
            logger.info("Spectator left lobby %s after %d updates", self.lobby_id, self.sent)

    async def _push_updates(self) -> None:
        lobby = str(self.lobby_id)
        while True:
            await anyio.sleep(self.interval)
            update = self.session.update(lobby)
            try:
                await self.ws.send_json(update.model_dump())
            except SEND_ERRORS as exc:
                logger.debug("Stream to lobby %s stopped: %r", self.lobby_id, exc)
                return
            self.sent += 1

    async def _wait_for_close(self) -> None:
        while True:
            try:
                message = await self.ws.receive()
            except SEND_ERRORS:
                return
            if message["type"] == "websocket.disconnect":
                return


__all__ = ["StreamState", "SpectatorStream"]
