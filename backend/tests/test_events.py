"""
Socket.IO event handlers: payload validation and translation at the relay boundary.
"""

import pytest

from pairchat.realtime import events
from pairchat.services.translation_service import TranslationError


class StubTranslator:
    def __init__(self, result: str | None = None) -> None:
        self.result = result
        self.calls: list[tuple[str, str]] = []

    async def translate(self, text: str, target_lang: str) -> str:
        self.calls.append((text, target_lang))
        if self.result is None:
            raise TranslationError("provider unavailable")
        return self.result


@pytest.fixture(autouse=True)
def wire_hub(monkeypatch, hub):
    monkeypatch.setattr(events, "chat_hub", hub)
    return hub


async def start_chat(emitter) -> str:
    await events.handle_user_info("a", {"interests": ["music", "travel"]})
    await events.handle_user_info("b", {"interests": ["travel", " sports ", "travel", ""]})
    room_id = emitter.named("chat_started")[0][0]["roomId"]
    emitter.clear()
    return room_id


async def test_user_info_normalises_interests(hub, emitter):
    await start_chat(emitter)
    assert hub.registry.get("b").interests == ["travel", "sports"]


async def test_malformed_user_info_is_dropped(hub, emitter, caplog):
    await events.handle_user_info("a", {"interests": "music"})
    await events.handle_user_info("b", None)

    assert len(hub.registry) == 0
    assert emitter.events == []
    assert "Dropping user_info" in caplog.text


async def test_send_message_defaults_to_text(emitter):
    room_id = await start_chat(emitter)

    await events.handle_send_message("a", {"roomId": room_id, "message": "hi"})

    assert [data["type"] for data, _ in emitter.named("receive_message")] == ["text", "text"]


async def test_clients_cannot_send_system_messages(emitter):
    room_id = await start_chat(emitter)

    await events.handle_send_message("a", {"roomId": room_id, "message": "fake", "type": "system"})

    assert emitter.events == []


async def test_image_message_passes_url_through(emitter):
    room_id = await start_chat(emitter)

    await events.handle_send_message(
        "b",
        {"roomId": room_id, "message": "Image", "type": "image", "imageUrl": "https://cdn.example/cat.png"},
    )

    received = emitter.named("receive_message")
    assert {target for _, target in received} == {"a", "b"}
    assert all(data["imageUrl"] == "https://cdn.example/cat.png" for data, _ in received)


async def test_translated_message_carries_translation(monkeypatch, emitter):
    translator = StubTranslator(result="hello")
    monkeypatch.setattr(events, "translation_service", translator)
    room_id = await start_chat(emitter)

    await events.handle_send_message("a", {"roomId": room_id, "message": "hola", "targetLang": "en"})

    assert translator.calls == [("hola", "en")]
    assert all(data["translation"] == "hello" for data, _ in emitter.named("receive_message"))


async def test_translation_failure_still_delivers(monkeypatch, emitter, caplog):
    monkeypatch.setattr(events, "translation_service", StubTranslator(result=None))
    room_id = await start_chat(emitter)

    await events.handle_send_message("a", {"roomId": room_id, "message": "hola", "targetLang": "en"})

    received = emitter.named("receive_message")
    assert len(received) == 2
    assert all("translation" not in data for data, _ in received)
    assert "untranslated" in caplog.text


async def test_images_are_never_translated(monkeypatch, emitter):
    translator = StubTranslator(result="nope")
    monkeypatch.setattr(events, "translation_service", translator)
    room_id = await start_chat(emitter)

    await events.handle_send_message(
        "a",
        {"roomId": room_id, "message": "Image", "type": "image", "imageUrl": "x", "targetLang": "en"},
    )

    assert translator.calls == []


async def test_typing_requires_boolean_flag(emitter):
    room_id = await start_chat(emitter)

    await events.handle_typing("a", {"roomId": room_id})
    assert emitter.events == []

    await events.handle_typing("a", {"roomId": room_id, "isTyping": False})
    assert emitter.events == [("partner_typing", {"isTyping": False}, "b")]


async def test_disconnect_event_notifies_partner(hub, emitter):
    await start_chat(emitter)

    await events.disconnect("b", "client disconnect")

    assert emitter.events == [("partner_disconnected", {}, "a")]
    assert "b" not in hub.registry
