"""Kapselt die Intent-Erkennung über Dialogflow ES (detectIntent)."""
import logging
from dataclasses import dataclass
from typing import Optional

from google.cloud import dialogflow

from chatbot.core.config import Settings
from chatbot.core.credentials import resolve_credentials_file

logger = logging.getLogger(__name__)

MISSING_PROJECT_ID = "DIALOGFLOW_PROJECT_ID not set. Please configure it in environment or .env"


@dataclass
class IntentResult:
    """Die Teile eines Dialogflow-QueryResults, die der Forwarder braucht."""

    fulfillment_text: str
    is_fallback: bool
    intent_name: str = ""
    confidence: float = 0.0


def build_sessions_client(settings: Settings) -> dialogflow.SessionsAsyncClient:
    """Erzeugt den asynchronen Sessions-Client aus den konfigurierten Credentials."""
    credentials_path = resolve_credentials_file(settings)
    if credentials_path:
        return dialogflow.SessionsAsyncClient.from_service_account_file(credentials_path)
    return dialogflow.SessionsAsyncClient()


class IntentDetector:
    """Schickt Nutzertexte unter einer Session-ID an Dialogflow und
    liefert Fulfillment-Text plus Fallback-Kennzeichen zurück."""

    def __init__(self, client, project_id: str, language_code: str = "en-US") -> None:
        if not project_id:
            raise RuntimeError(MISSING_PROJECT_ID)
        self.client = client
        self.project_id = project_id
        self.language_code = language_code

    @classmethod
    def from_settings(cls, settings: Settings, client: Optional[object] = None) -> "IntentDetector":
        if not settings.dialogflow_project_id:
            raise RuntimeError(MISSING_PROJECT_ID)
        return cls(
            client or build_sessions_client(settings),
            settings.dialogflow_project_id,
            settings.dialogflow_language_code,
        )

    def session_path(self, session_id: str) -> str:
        return dialogflow.SessionsClient.session_path(self.project_id, session_id)

    async def detect(self, text: str, session_id: str) -> IntentResult:
        request = dialogflow.DetectIntentRequest(
            session=self.session_path(session_id),
            query_input=dialogflow.QueryInput(
                text=dialogflow.TextInput(text=text, language_code=self.language_code)
            ),
        )
        response = await self.client.detect_intent(request=request)
        result = response.query_result

        # Ohne gematchten Intent gilt das Ergebnis nicht als Fallback.
        intent = result.intent
        is_fallback = bool(intent and intent.is_fallback)
        logger.info(
            f"Dialogflow [Session {session_id}]: intent='{intent.display_name if intent else ''}' "
            f"fallback={is_fallback}"
        )
        return IntentResult(
            fulfillment_text=result.fulfillment_text,
            is_fallback=is_fallback,
            intent_name=intent.display_name if intent else "",
            confidence=result.intent_detection_confidence,
        )
