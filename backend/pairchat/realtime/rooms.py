from __future__ import annotations

import logging
from typing import Dict, Iterator, Optional, Sequence
from uuid import uuid4

from pairchat.models import Room

logger = logging.getLogger(__name__)


class RoomConflictError(RuntimeError):
    """Raised when a room cannot be stored without breaking the pairing rules."""


class RoomManager:
    """Live two-party rooms keyed by room id.

    Participant lookup is a linear scan over all rooms, O(n) in the number of
    live rooms.
    """

    def __init__(self) -> None:
        self._rooms: Dict[str, Room] = {}

    @staticmethod
    def new_room_id() -> str:
        return str(uuid4())

    def create(self, room_id: str, participants: Sequence[str]) -> Room:
        if room_id in self._rooms:
            raise RoomConflictError(f"Room id {room_id} is already in use")
        if len(participants) != 2 or participants[0] == participants[1]:
            raise RoomConflictError("A room needs exactly two distinct participants")
        room = Room(id=room_id, participants=(participants[0], participants[1]))
        self._rooms[room_id] = room
        logger.debug("Room %s created for %s", room_id, room.participants)
        return room

    def get(self, room_id: str) -> Optional[Room]:
        return self._rooms.get(room_id)

    def find_by_participant(self, session_id: str) -> Optional[Room]:
        for room in self._rooms.values():
            if room.has_participant(session_id):
                return room
        return None

    def delete(self, room_id: str) -> Optional[Room]:
        room = self._rooms.pop(room_id, None)
        if room is not None:
            logger.debug("Room %s deleted", room_id)
        return room

    def __iter__(self) -> Iterator[Room]:
        return iter(list(self._rooms.values()))

    def __len__(self) -> int:
        return len(self._rooms)
