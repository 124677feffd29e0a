from __future__ import annotations

import logging

from pairchat.realtime.commands import Notification
from pairchat.realtime.registry import ConnectionRegistry
from pairchat.realtime.rooms import RoomManager

logger = logging.getLogger(__name__)


class DisconnectHandler:
    """Tears down a session's room and registry entry on connection loss.

    The surviving peer is told once via ``partner_disconnected`` and drops back
    to waiting; it is not re-matched until its client registers again.
    Running the cleanup twice for the same id is a no-op the second time.
    """

    def __init__(self, registry: ConnectionRegistry, rooms: RoomManager) -> None:
        self._registry = registry
        self._rooms = rooms

    def release(self, session_id: str) -> list[Notification]:
        room = self._rooms.find_by_participant(session_id)
        if room is None:
            return []

        notifications: list[Notification] = []
        peer_id = room.other(session_id)
        peer = self._registry.get(peer_id) if peer_id else None
        if peer is not None:
            peer.matched = False
            notifications.append(Notification("partner_disconnected", peer.id))
        self._rooms.delete(room.id)

        session = self._registry.get(session_id)
        if session is not None:
            session.matched = False
        logger.info("Room %s closed after %s left", room.id, session_id)
        return notifications

    def handle(self, session_id: str) -> list[Notification]:
        notifications = self.release(session_id)
        if self._registry.unregister(session_id) is None:
            logger.debug("Disconnect for unregistered session %s", session_id)
        return notifications
