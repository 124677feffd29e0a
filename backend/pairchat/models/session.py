from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class UserSession:
    id: str
    interests: list[str] = field(default_factory=list)
    matched: bool = False
    registered_at: datetime = field(default_factory=lambda: datetime.now(tz=timezone.utc))

    def shares_interest_with(self, other: UserSession) -> bool:
        return not set(self.interests).isdisjoint(other.interests)

    def __repr__(self) -> str:
        return f"UserSession(id={self.id}, matched={self.matched}, interests={self.interests})"


@dataclass
class Room:
    id: str
    participants: tuple[str, str]
    created_at: datetime = field(default_factory=lambda: datetime.now(tz=timezone.utc))

    def has_participant(self, session_id: str) -> bool:
        return session_id in self.participants

    def other(self, session_id: str) -> str | None:
        if session_id not in self.participants:
            return None
        first, second = self.participants
        return second if session_id == first else first
