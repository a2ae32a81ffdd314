"""Chat-Router stellt den Endpunkt des Widgets bereit (POST /api/chatbot)."""
import logging
from typing import Optional

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from chatbot.core.models import ChatReply, ChatRequest

router = APIRouter(prefix="/api/chatbot", tags=["Chatbot"])
logger = logging.getLogger(__name__)

NO_MESSAGE_REPLY = "No message provided."
ERROR_REPLY = "Something went wrong. Please try again later."


@router.post("", response_model=ChatReply)
@router.post("/", response_model=ChatReply, include_in_schema=False)
async def handle_message(request: Request, body: Optional[ChatRequest] = None):
    """Haupt-Endpunkt für Nachrichten aus dem Widget.

    - Leere oder fehlende Nachricht -> 400, ohne Upstream-Aufruf.
    - Sonst Weiterleitung über den MessageForwarder (Dialogflow, ggf. Gemini).
    - Jeder Upstream-Fehler -> 500 mit generischem Text; Details nur im Log.
    """
    if body is None or not body.message:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"reply": NO_MESSAGE_REPLY},
        )

    forwarder = request.app.state.forwarder
    try:
        reply = await forwarder.forward(body.message)
    except Exception:
        logger.exception("Upstream error while forwarding message")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"reply": ERROR_REPLY},
        )

    return ChatReply(reply=reply)
