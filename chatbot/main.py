"""FastAPI-Einstiegspunkt für das Dialogflow Chat-Widget."""
import logging
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from chatbot.core.config import Settings
from chatbot.core.forwarder import MessageForwarder
from chatbot.core.gemini import GeminiClient
from chatbot.core.intents import IntentDetector
from chatbot.core.logging_setup import setup_logging

from chatbot.routers import chatbot as chatbot_router

STATIC_DIR = Path(__file__).resolve().parent / "static"

logger = logging.getLogger(__name__)

# Initialisierung der App
app = FastAPI(
    title="Dialogflow Chat Widget",
    version="1.0.0",
    description="Forwards chat messages to Dialogflow with a Gemini fallback.",
)

# Setup Logging (File + Console)
setup_logging()


@app.on_event("startup")
async def startup_event() -> None:
    """Initialisiert die Upstream-Clients beim Start der Anwendung.

    - Löst die Credentials auf (Base64, Inline-JSON oder Dateipfad).
    - Erstellt den Dialogflow-Client und den Gemini-Client.
    Konfigurationsfehler brechen den Start ab.
    """
    settings = Settings()

    detector = IntentDetector.from_settings(settings)
    completer = GeminiClient.from_settings(settings)
    app.state.forwarder = MessageForwarder(detector, completer)

    if not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY is not set, fallback replies will fail.")
    logger.info(f"Chat widget initialised for Dialogflow project '{settings.dialogflow_project_id}'.")


# Router registrieren
app.include_router(chatbot_router.router)

# Statische Chat-Seite unter "/" (nach den API-Routen, sonst verdeckt der Mount sie)
app.mount("/", StaticFiles(directory=STATIC_DIR, html=True), name="static")


def run() -> None:
    """Startet den Server auf dem konfigurierten Port."""
    settings = Settings()
    logger.info(f"Server running at http://localhost:{settings.port}")
    uvicorn.run(app, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()
