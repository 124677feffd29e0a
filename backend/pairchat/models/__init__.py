from .enums import MessageKind, SessionState
from .session import Room, UserSession

__all__ = [
	"MessageKind",
	"Room",
	"SessionState",
	"UserSession",
]
