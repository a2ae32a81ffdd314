"""API-Modelle für das Chat-Widget: eingehende Nachricht und Bot-Antwort."""
from typing import Optional

from pydantic import BaseModel


class ChatRequest(BaseModel):
    """Eingehende Nachricht aus dem Browser. `message` ist optional, damit
    ein fehlendes Feld als 400 statt als Validierungsfehler beantwortet wird."""

    message: Optional[str] = None


class ChatReply(BaseModel):
    """Antwort an den Browser, sowohl im Erfolgs- als auch im Fehlerfall."""

    reply: str
