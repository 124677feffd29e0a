from __future__ import annotations

import logging
from typing import Any, Dict

from pydantic import ValidationError

from pairchat.models import MessageKind
from pairchat.realtime.commands import Disconnect, Register, SendMessage, Typing
from pairchat.realtime.server import chat_hub, sio
from pairchat.schemas.chat import SendMessagePayload, TypingPayload, UserInfoPayload
from pairchat.services.translation_service import TranslationError, translation_service

logger = logging.getLogger(__name__)


@sio.event
async def connect(sid: str, environ: dict[str, Any], auth: dict[str, Any] | None = None) -> None:
    logger.info("User connected: %s", sid)


@sio.event
async def disconnect(sid: str, reason: Any = None) -> None:
    await chat_hub.dispatch(Disconnect(session_id=sid))
    logger.info("User disconnected: %s", sid)


@sio.on("user_info")
async def handle_user_info(sid: str, data: Dict[str, Any]) -> None:
    try:
        payload = UserInfoPayload.model_validate(data)
    except ValidationError as exc:
        logger.warning("Dropping user_info from %s: %s", sid, exc.errors())
        return

    logger.debug("Received user info from %s: %s", sid, payload.interests)
    await chat_hub.dispatch(Register(session_id=sid, interests=tuple(payload.interests)))


@sio.on("send_message")
async def handle_send_message(sid: str, data: Dict[str, Any]) -> None:
    try:
        payload = SendMessagePayload.model_validate(data)
    except ValidationError as exc:
        logger.warning("Dropping send_message from %s: %s", sid, exc.errors())
        return

    translation = None
    if payload.target_lang and payload.type == MessageKind.TEXT and payload.message:
        try:
            translation = await translation_service.translate(payload.message, payload.target_lang)
        except TranslationError as exc:
            logger.warning("Delivering message from %s untranslated: %s", sid, exc)

    await chat_hub.dispatch(
        SendMessage(
            session_id=sid,
            room_id=payload.room_id,
            message=payload.message,
            kind=payload.type,
            image_url=payload.image_url,
            translation=translation,
        )
    )


@sio.on("typing")
async def handle_typing(sid: str, data: Dict[str, Any]) -> None:
    try:
        payload = TypingPayload.model_validate(data)
    except ValidationError as exc:
        logger.warning("Dropping typing from %s: %s", sid, exc.errors())
        return

    await chat_hub.dispatch(Typing(session_id=sid, room_id=payload.room_id, is_typing=payload.is_typing))
