from __future__ import annotations

import logging
from typing import Any

import httpx

from pairchat.core.config import settings

logger = logging.getLogger(__name__)


class TranslationError(RuntimeError):
    """The translation provider could not produce a result."""


class TranslationService:
    """Client for a LibreTranslate-compatible translation provider."""

    def __init__(
        self,
        api_url: str,
        api_key: str | None = None,
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_url = api_url
        self._api_key = api_key
        self._timeout = timeout
        self._transport = transport

    async def translate(self, text: str, target_lang: str) -> str:
        body: dict[str, Any] = {"q": text, "source": "auto", "target": target_lang, "format": "text"}
        if self._api_key:
            body["api_key"] = self._api_key

        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.post(self._api_url, json=body)
                response.raise_for_status()
                data = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise TranslationError(f"Translation to {target_lang} failed: {exc}") from exc

        translated = data.get("translatedText") if isinstance(data, dict) else None
        if not isinstance(translated, str):
            raise TranslationError("Translation provider returned no translatedText")
        return translated


translation_service = TranslationService(
    api_url=settings.translation_api_url,
    api_key=settings.translation_api_key,
    timeout=settings.translation_timeout_seconds,
)
