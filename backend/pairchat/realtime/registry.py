from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, Optional

from pairchat.models import SessionState, UserSession

logger = logging.getLogger(__name__)


class ConnectionRegistry:
    """Connected sessions keyed by connection id, in registration order.

    Dict insertion order is the scan order used by the matcher. Overwriting an
    existing id keeps its original position.
    """

    def __init__(self) -> None:
        self._sessions: Dict[str, UserSession] = {}

    def register(self, session_id: str, interests: Iterable[str]) -> UserSession:
        if session_id in self._sessions:
            logger.warning("Duplicate registration for %s; overwriting previous session", session_id)
        session = UserSession(id=session_id, interests=list(interests), matched=False)
        self._sessions[session_id] = session
        return session

    def unregister(self, session_id: str) -> Optional[UserSession]:
        return self._sessions.pop(session_id, None)

    def get(self, session_id: str) -> Optional[UserSession]:
        return self._sessions.get(session_id)

    def state_of(self, session_id: str) -> SessionState:
        session = self._sessions.get(session_id)
        if session is None:
            return SessionState.UNREGISTERED
        return SessionState.PAIRED if session.matched else SessionState.WAITING

    def counts(self) -> tuple[int, int]:
        paired = sum(1 for session in self._sessions.values() if session.matched)
        return len(self._sessions) - paired, paired

    def __iter__(self) -> Iterator[UserSession]:
        return iter(list(self._sessions.values()))

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)
