"""Per-lobby playback state.

A ``SessionRecord`` owns the playback clock of one lobby and delegates the
content of each update to a ``PlaybackSource``. Only the clock placeholder
exists today; a mission-event producer plugs in through the same interface.
"""
from __future__ import annotations

import abc
import time
from typing import Any, Callable, Dict, Optional

from .schemas import SessionUpdate


class PlaybackSource(abc.ABC):
    """Produces the payload of a session update for a playback position."""

    @abc.abstractmethod
    def snapshot(self, elapsed: float) -> Dict[str, Any]:
        """Return the state to publish *elapsed* seconds into playback."""


class ClockPlaybackSource(PlaybackSource):
    """Placeholder source: publishes nothing but the clock itself."""

    def snapshot(self, elapsed: float) -> Dict[str, Any]:
        return {"position": round(elapsed, 3)}


class SessionRecord:
    """Playback cursor for a single lobby."""

    def __init__(
        self,
        source: Optional[PlaybackSource] = None,
        mission_id: Optional[str] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.source: PlaybackSource = source or ClockPlaybackSource()
        self.mission_id = mission_id
        self._clock = clock
        self.started_at: float = clock()

    def elapsed(self) -> float:
        """Seconds since the session started; never decreases."""
        return max(0.0, self._clock() - self.started_at)

    def update(self, lobby_id: str = "") -> SessionUpdate:
        elapsed = self.elapsed()
        return SessionUpdate(
            lobby_id=lobby_id,
            mission_id=self.mission_id,
            elapsed_ms=int(elapsed * 1000),
            payload=self.source.snapshot(elapsed),
        )


__all__ = ["PlaybackSource", "ClockPlaybackSource", "SessionRecord"]
