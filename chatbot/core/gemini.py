"""Fallback-Antworten über die Gemini-API (generateContent), wenn Dialogflow
keinen passenden Intent findet."""
import logging
from typing import Optional

import httpx

from chatbot.core.config import Settings

logger = logging.getLogger(__name__)

DEFAULT_REPLY = "I'm not sure how to help with that."


class GeminiError(RuntimeError):
    """Gemini ist nicht nutzbar (z.B. fehlender API-Key)."""


class GeminiClient:
    """Schickt einen Prompt an Gemini und gibt den ersten Kandidaten-Text zurück."""

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-1.5-flash-latest",
        api_base: str = "https://generativelanguage.googleapis.com/v1beta",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "GeminiClient":
        return cls(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            api_base=settings.gemini_api_base,
            timeout=settings.gemini_timeout,
        )

    @property
    def endpoint(self) -> str:
        return f"{self.api_base}/models/{self.model}:generateContent"

    async def generate(self, text: str) -> str:
        """Call Gemini and return the reply text."""
        if not self.api_key:
            raise GeminiError("GEMINI_API_KEY not configured")

        payload = {"contents": [{"parts": [{"text": text}]}]}

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            response = await client.post(
                self.endpoint,
                params={"key": self.api_key},
                headers={"Content-Type": "application/json"},
                json=payload,
            )
            if response.is_error:
                logger.error(f"Gemini API Error {response.status_code}: {response.text}")
            response.raise_for_status()
            data = response.json()

        return extract_text(data) or DEFAULT_REPLY


def extract_text(data: dict) -> str:
    """Liest candidates[0].content.parts[0].text; fehlende Teile ergeben ""."""
    try:
        return data["candidates"][0]["content"]["parts"][0].get("text") or ""
    except (KeyError, IndexError, TypeError, AttributeError):
        return ""
