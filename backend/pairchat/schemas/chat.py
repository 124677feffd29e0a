from __future__ import annotations

from pydantic import Field, field_validator

from pairchat.models import MessageKind
from pairchat.schemas.common import APIModel


class UserInfoPayload(APIModel):
    interests: list[str] = Field(default_factory=list)

    @field_validator("interests")
    @classmethod
    def _normalise_interests(cls, value: list[str]) -> list[str]:
        seen: dict[str, None] = {}
        for interest in value:
            cleaned = interest.strip()
            if cleaned:
                seen.setdefault(cleaned, None)
        return list(seen)


class SendMessagePayload(APIModel):
    room_id: str = Field(alias="roomId", min_length=1)
    message: str = Field(default="")
    type: MessageKind = Field(default=MessageKind.TEXT)
    image_url: str | None = Field(default=None, alias="imageUrl")
    target_lang: str | None = Field(default=None, alias="targetLang")

    @field_validator("type")
    @classmethod
    def _client_kinds_only(cls, value: MessageKind) -> MessageKind:
        if value == MessageKind.SYSTEM:
            raise ValueError("system messages are server generated")
        return value


class TypingPayload(APIModel):
    room_id: str = Field(alias="roomId", min_length=1)
    is_typing: bool = Field(alias="isTyping")


class StatsRead(APIModel):
    waiting: int
    paired: int
    rooms: int
