"""Collection of live streaming sessions owned by one client."""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .session import SocketSession

logger = logging.getLogger(__name__)


class SessionRegistry:
    """Thread-safe, identity-keyed set of SocketSessions.

    Sessions add themselves once connected and remove themselves on close,
    error or reconnect exhaustion. ``add``/``discard`` report whether they
    changed membership so callers can release a session's resources once.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._sessions: dict[int, SocketSession] = {}

    def add(self, session: SocketSession) -> bool:
        with self._lock:
            key = id(session)
            if key in self._sessions:
                return False
            self._sessions[key] = session
            return True

    def discard(self, session: SocketSession) -> bool:
        with self._lock:
            return self._sessions.pop(id(session), None) is not None

    def snapshot(self) -> list[SocketSession]:
        """Copy of the current members."""
        with self._lock:
            return list(self._sessions.values())

    def __contains__(self, session: object) -> bool:
        with self._lock:
            return self._sessions.get(id(session)) is session

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def __iter__(self) -> Iterator[SocketSession]:
        return iter(self.snapshot())

    async def close_all(self) -> None:
        """Close every registered session concurrently."""
        sessions = self.snapshot()
        if not sessions:
            return
        logger.debug(f"Closing {len(sessions)} open sockets")
        results = await asyncio.gather(*(s.close() for s in sessions), return_exceptions=True)
        for session, result in zip(sessions, results):
            if isinstance(result, Exception):
                logger.error(f"Error closing socket {session.url}: {result}")
