from pairchat.realtime.hub import ChatHub
from pairchat.realtime.server import chat_hub
from pairchat.services.translation_service import TranslationService, translation_service


def get_translation_service() -> TranslationService:
    return translation_service


def get_chat_hub() -> ChatHub:
    return chat_hub


__all__ = ["get_chat_hub", "get_translation_service"]
