"""Sessions and their registry, with expiry of idle sessions."""

from __future__ import annotations

import abc
import time
from typing import Any, TypeVar

SESSION_TIMEOUT = 5 * 60.0
"""Seconds of inactivity after which :meth:`SessionManager.tick` closes a session."""


class Session(abc.ABC):
    """A connected peer."""

    @abc.abstractmethod
    def start(self) -> None:
        """Begin processing the session."""

    @abc.abstractmethod
    def close(self) -> None:
        """End the session."""

    @abc.abstractmethod
    def send(self, message: Any) -> None:
        """Send ``message`` to the peer."""

    @abc.abstractmethod
    def last_active(self) -> float:
        """Monotonic time, in seconds, of the session's last activity."""


S = TypeVar("S", bound=Session)


class SessionManager:
    """Keeps sessions by identifier and drops those idle too long."""

    def __init__(self, timeout: float = SESSION_TIMEOUT) -> None:
        self.timeout = timeout
        self._sessions: dict[str, Session] = {}

    def register(self, session_id: str, session: Session) -> None:
        """Store ``session`` under ``session_id``, replacing any earlier one."""
        self._sessions[session_id] = session

    def unregister(self, session_id: str) -> None:
        """Forget the session under ``session_id``, if any."""
        self._sessions.pop(session_id, None)

    def find(self, session_id: str) -> Session | None:
        return self._sessions.get(session_id)

    def find_typed(self, session_id: str, session_type: type[S]) -> S | None:
        """Return the session if it exists and is a ``session_type``, else None."""
        session = self._sessions.get(session_id)
        return session if isinstance(session, session_type) else None

    def tick(self, now: float | None = None) -> None:
        """Close and remove sessions idle for longer than the timeout."""
        if now is None:
            now = time.monotonic()
        expired = [
            session_id
            for session_id, session in self._sessions.items()
            if now - session.last_active() > self.timeout
        ]
        for session_id in expired:
            self._sessions.pop(session_id).close()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions