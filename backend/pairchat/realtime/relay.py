from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from pairchat.models import MessageKind, Room
from pairchat.realtime.commands import Notification
from pairchat.realtime.rooms import RoomManager

logger = logging.getLogger(__name__)


@dataclass
class RelayedMessage:
    sender: str | None
    message: str
    kind: MessageKind
    image_url: str | None = None
    translation: str | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(tz=timezone.utc))

    def as_payload(self) -> dict[str, Optional[str]]:
        payload: dict[str, Optional[str]] = {
            "sender": self.sender,
            "message": self.message,
            "type": self.kind.value,
            "timestamp": self.timestamp.isoformat(),
        }
        if self.image_url is not None:
            payload["imageUrl"] = self.image_url
        if self.translation is not None:
            payload["translation"] = self.translation
        return payload


class MessageRelay:
    """Builds the notifications that carry chat traffic inside a room.

    Messages go to both participants, sender included. Typing status goes to
    the other participant only. Nothing is validated, throttled or coalesced.
    """

    def __init__(self, rooms: RoomManager) -> None:
        self._rooms = rooms

    def send_message(
        self,
        room_id: str,
        sender_id: str,
        message: str,
        kind: MessageKind = MessageKind.TEXT,
        image_url: str | None = None,
        translation: str | None = None,
    ) -> list[Notification]:
        room = self._member_room(room_id, sender_id)
        if room is None:
            return []
        relayed = RelayedMessage(
            sender=sender_id,
            message=message,
            kind=kind,
            image_url=image_url,
            translation=translation,
        )
        return self._broadcast(room, relayed)

    def system_notice(self, room_id: str, text: str) -> list[Notification]:
        room = self._rooms.get(room_id)
        if room is None:
            return []
        return self._broadcast(room, RelayedMessage(sender=None, message=text, kind=MessageKind.SYSTEM))

    def send_typing(self, room_id: str, sender_id: str, is_typing: bool) -> list[Notification]:
        room = self._member_room(room_id, sender_id)
        if room is None:
            return []
        recipient = room.other(sender_id)
        return [Notification("partner_typing", recipient, {"isTyping": is_typing})]

    def _member_room(self, room_id: str, sender_id: str) -> Optional[Room]:
        room = self._rooms.get(room_id)
        if room is None or not room.has_participant(sender_id):
            logger.debug("Dropping relay from %s: not a participant of room %s", sender_id, room_id)
            return None
        return room

    @staticmethod
    def _broadcast(room: Room, relayed: RelayedMessage) -> list[Notification]:
        payload = relayed.as_payload()
        return [Notification("receive_message", participant, dict(payload)) for participant in room.participants]
