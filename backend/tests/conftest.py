"""
Pytest configuration for pairchat backend tests.
"""

from typing import Any

import pytest

from pairchat.realtime.hub import ChatHub


class RecordingEmitter:
    """Stands in for ``sio.emit`` and keeps every emitted event."""

    def __init__(self) -> None:
        self.events: list[tuple[str, Any, str | None]] = []

    async def __call__(self, event: str, data: Any = None, *, to: str | None = None) -> None:
        self.events.append((event, data, to))

    def to(self, sid: str) -> list[tuple[str, Any]]:
        return [(event, data) for event, data, target in self.events if target == sid]

    def named(self, event_name: str) -> list[tuple[Any, str | None]]:
        return [(data, target) for event, data, target in self.events if event == event_name]

    def clear(self) -> None:
        self.events.clear()


@pytest.fixture
def emitter() -> RecordingEmitter:
    return RecordingEmitter()


@pytest.fixture
def hub(emitter: RecordingEmitter) -> ChatHub:
    return ChatHub(emit=emitter)
