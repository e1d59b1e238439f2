"""Lobby registry: the only shared mutable state in the server.

Lobbies are keyed by a server-generated UUID. Operators may also refer to
a lobby through a human-chosen name; every name points at a live UUID,
while a UUID does not need a name.
"""
from __future__ import annotations

import logging
import threading
import uuid
from contextlib import contextmanager
from typing import Dict, Iterator, Optional

from .session import SessionRecord

logger = logging.getLogger(__name__)


class ReadWriteLock:
    """Many concurrent readers or a single writer.

    Waiting writers block new readers so a steady stream of lookups cannot
    starve lobby creation.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._waiting_writers:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if not self._readers:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            self._waiting_writers += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._waiting_writers -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class Lobby:
    """A replay session spectators can join."""

    def __init__(self, name: Optional[str] = None, mission_id: Optional[str] = None):
        self.identifier: uuid.UUID = uuid.uuid4()
        self.name = name
        self.session = SessionRecord(mission_id=mission_id)

    def __repr__(self) -> str:
        return f"Lobby(identifier={self.identifier}, name={self.name!r})"


class LobbyRegistry:
    """Maps lobby names and identifiers to live ``Lobby`` objects."""

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._lobbies: Dict[uuid.UUID, Lobby] = {}
        self._names: Dict[str, uuid.UUID] = {}

    # -------------------- Lookup -------------------- #

    def _resolve_unlocked(self, name_or_identifier: str) -> Optional[uuid.UUID]:
        try:
            identifier = uuid.UUID(name_or_identifier)
        except ValueError:
            identifier = None
        if identifier is not None and identifier in self._lobbies:
            return identifier

        # A UUID-shaped string with no live lobby may still be a name.
        identifier = self._names.get(name_or_identifier)
        if identifier is not None and identifier in self._lobbies:
            return identifier
        return None

    def resolve(self, name_or_identifier: str) -> Optional[uuid.UUID]:
        """Return the live lobby identifier for a raw UUID string or a name."""
        with self._lock.read():
            return self._resolve_unlocked(name_or_identifier)

    def session_for(self, identifier: uuid.UUID) -> Optional[SessionRecord]:
        with self._lock.read():
            lobby = self._lobbies.get(identifier)
            return lobby.session if lobby else None

    # -------------------- Mutation -------------------- #

    def create_or_get(self, name: str, mission_id: Optional[str] = None) -> uuid.UUID:
        """Return the lobby registered under *name*, creating it if needed.

        The lookup and the insert share one write-locked section, so racing
        callers with the same name always observe a single lobby.
        """
        with self._lock.write():
            existing = self._resolve_unlocked(name)
            if existing is not None:
                return existing

            lobby = Lobby(name=name, mission_id=mission_id)
            self._lobbies[lobby.identifier] = lobby
            self._names[name] = lobby.identifier
        logger.info("Created lobby %s for name %r", lobby.identifier, name)
        return lobby.identifier

    def release(self, identifier: uuid.UUID) -> bool:
        """Drop a lobby and every name aliasing it. Returns *False* if unknown."""
        with self._lock.write():
            lobby = self._lobbies.pop(identifier, None)
            if lobby is None:
                return False
            for name in [n for n, i in self._names.items() if i == identifier]:
                del self._names[name]
        logger.info("Released lobby %s", identifier)
        return True

    # -------------------- Inspection -------------------- #

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._lobbies)

    def __contains__(self, identifier: object) -> bool:
        with self._lock.read():
            return identifier in self._lobbies


__all__ = ["ReadWriteLock", "Lobby", "LobbyRegistry"]
