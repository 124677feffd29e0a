from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, Optional, Protocol

from pairchat.models import SessionState
from pairchat.realtime.commands import Command, Disconnect, Notification, Register, SendMessage, Typing
from pairchat.realtime.disconnect import DisconnectHandler
from pairchat.realtime.matcher import Matcher
from pairchat.realtime.registry import ConnectionRegistry
from pairchat.realtime.relay import MessageRelay
from pairchat.realtime.rooms import RoomManager

logger = logging.getLogger(__name__)


class Emitter(Protocol):
    def __call__(self, event: str, data: Any = None, *, to: Optional[str] = None) -> Awaitable[Any]: ...


Handler = Callable[["ChatHub", Any], list[Notification]]


class ChatHub:
    """Owns all session and room state and applies commands one at a time.

    Every command runs under a single lock, including emission of the
    notifications it produces, so the matcher's scan and commit are atomic and
    traffic within a room is delivered in processing order.
    """

    def __init__(
        self,
        emit: Emitter,
        registry: ConnectionRegistry | None = None,
        rooms: RoomManager | None = None,
    ) -> None:
        self._emit = emit
        self.registry = registry or ConnectionRegistry()
        self.rooms = rooms or RoomManager()
        self.matcher = Matcher(self.registry, self.rooms)
        self.relay = MessageRelay(self.rooms)
        self.disconnects = DisconnectHandler(self.registry, self.rooms)
        self._lock = asyncio.Lock()

    async def dispatch(self, command: Command) -> list[Notification]:
        async with self._lock:
            state = self.registry.state_of(command.session_id)
            handler = _TRANSITIONS.get((state, type(command)))
            if handler is None:
                logger.debug(
                    "Ignoring %s from %s in state %s",
                    type(command).__name__,
                    command.session_id,
                    state.value,
                )
                return []
            notifications = handler(self, command)
            for notification in notifications:
                await self._emit(notification.event, notification.payload, to=notification.to)
            return notifications

    async def stats(self) -> dict[str, int]:
        async with self._lock:
            waiting, paired = self.registry.counts()
            return {"waiting": waiting, "paired": paired, "rooms": len(self.rooms)}

    def _register(self, command: Register) -> list[Notification]:
        self.registry.register(command.session_id, command.interests)
        result = self.matcher.pair(command.session_id)
        if result is None:
            return []

        payload = result.chat_started_payload()
        notifications = [Notification("chat_started", participant, dict(payload)) for participant in result.room.participants]
        if result.shared_interests:
            notice = f"You both like: {', '.join(result.shared_interests)}"
            notifications.extend(self.relay.system_notice(result.room.id, notice))
        return notifications

    def _reregister_paired(self, command: Register) -> list[Notification]:
        notifications = self.disconnects.release(command.session_id)
        return notifications + self._register(command)

    def _send_message(self, command: SendMessage) -> list[Notification]:
        return self.relay.send_message(
            command.room_id,
            command.session_id,
            command.message,
            kind=command.kind,
            image_url=command.image_url,
            translation=command.translation,
        )

    def _typing(self, command: Typing) -> list[Notification]:
        return self.relay.send_typing(command.room_id, command.session_id, command.is_typing)

    def _disconnect(self, command: Disconnect) -> list[Notification]:
        return self.disconnects.handle(command.session_id)


_TRANSITIONS: Dict[tuple[SessionState, type], Handler] = {
    (SessionState.UNREGISTERED, Register): ChatHub._register,
    (SessionState.WAITING, Register): ChatHub._register,
    (SessionState.PAIRED, Register): ChatHub._reregister_paired,
    (SessionState.PAIRED, SendMessage): ChatHub._send_message,
    (SessionState.PAIRED, Typing): ChatHub._typing,
    (SessionState.UNREGISTERED, Disconnect): ChatHub._disconnect,
    (SessionState.WAITING, Disconnect): ChatHub._disconnect,
    (SessionState.PAIRED, Disconnect): ChatHub._disconnect,
}
