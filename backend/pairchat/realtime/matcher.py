from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from pairchat.models import Room, UserSession
from pairchat.realtime.registry import ConnectionRegistry
from pairchat.realtime.rooms import RoomManager

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchResult:
    room: Room
    requester: UserSession
    partner: UserSession
    interests: list[str]
    shared_interests: list[str]

    def chat_started_payload(self) -> dict[str, object]:
        return {"roomId": self.room.id, "interests": list(self.interests)}


def merge_interests(first: list[str], second: list[str]) -> list[str]:
    """Union of both lists in first-occurrence order."""

    return list(dict.fromkeys([*first, *second]))


class Matcher:
    """First-fit interest matcher over the registry's insertion order."""

    def __init__(self, registry: ConnectionRegistry, rooms: RoomManager) -> None:
        self._registry = registry
        self._rooms = rooms

    def find_partner(self, session_id: str) -> Optional[UserSession]:
        requester = self._registry.get(session_id)
        if requester is None:
            return None
        for candidate in self._registry:
            if candidate.id == session_id or candidate.matched:
                continue
            if requester.shares_interest_with(candidate):
                return candidate
        return None

    def pair(self, session_id: str) -> Optional[MatchResult]:
        partner = self.find_partner(session_id)
        if partner is None:
            logger.info("No match found for %s", session_id)
            return None

        requester = self._registry.get(session_id)
        # Both sides must still be registered and free at commit time.
        if (
            requester is None
            or requester.matched
            or self._registry.get(partner.id) is not partner
            or partner.matched
        ):
            logger.warning("Match between %s and %s went stale before commit", session_id, partner.id)
            return None

        room = self._rooms.create(self._rooms.new_room_id(), [requester.id, partner.id])
        requester.matched = True
        partner.matched = True

        partner_interests = set(partner.interests)
        shared = [interest for interest in requester.interests if interest in partner_interests]
        logger.info("Match found: %s <-> %s in room %s", requester.id, partner.id, room.id)
        return MatchResult(
            room=room,
            requester=requester,
            partner=partner,
            interests=merge_interests(requester.interests, partner.interests),
            shared_interests=shared,
        )
