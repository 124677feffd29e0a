"""Commands accepted by the chat hub and the notifications it produces."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from pairchat.models import MessageKind


@dataclass(frozen=True)
class Register:
    session_id: str
    interests: tuple[str, ...] = ()


@dataclass(frozen=True)
class SendMessage:
    session_id: str
    room_id: str
    message: str
    kind: MessageKind = MessageKind.TEXT
    image_url: str | None = None
    translation: str | None = None


@dataclass(frozen=True)
class Typing:
    session_id: str
    room_id: str
    is_typing: bool


@dataclass(frozen=True)
class Disconnect:
    session_id: str


Command = Union[Register, SendMessage, Typing, Disconnect]


@dataclass(frozen=True)
class Notification:
    event: str
    to: str
    payload: dict[str, Any] = field(default_factory=dict)
