from enum import Enum


class SessionState(str, Enum):
    UNREGISTERED = "unregistered"
    WAITING = "waiting"
    PAIRED = "paired"


class MessageKind(str, Enum):
    TEXT = "text"
    IMAGE = "image"
    SYSTEM = "system"
