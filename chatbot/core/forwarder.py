"""Leitet Nutzernachrichten an Dialogflow weiter und fällt bei einem
Fallback-Intent auf Gemini zurück."""
import logging
import uuid

from chatbot.core.gemini import GeminiClient
from chatbot.core.intents import IntentDetector

logger = logging.getLogger(__name__)


class MessageForwarder:
    """Orchestriert genau einen Dialogflow-Aufruf pro Nachricht und höchstens
    einen Gemini-Aufruf. Fehler der Upstream-Dienste werden nicht abgefangen,
    sondern an den Router weitergereicht."""

    def __init__(self, detector: IntentDetector, completer: GeminiClient) -> None:
        self.detector = detector
        self.completer = completer

    async def forward(self, message: str) -> str:
        """Gibt den Fulfillment-Text oder, bei Fallback, die Gemini-Antwort zurück."""
        session_id = str(uuid.uuid4())
        result = await self.detector.detect(message, session_id)

        if result.is_fallback:
            logger.info("Fallback intent detected, switching to Gemini...")
            return await self.completer.generate(message)

        return result.fulfillment_text
