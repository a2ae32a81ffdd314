"""Konfigurationsmodul für das Chat-Widget: lädt Dialogflow-, Gemini- und
Server-Einstellungen aus Umgebungsvariablen bzw. `.env` via Pydantic-Settings."""
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Hält alle konfigurierbaren Werte, die das Widget zur Laufzeit
    benötigt (Projekt-ID, Credentials in drei Varianten, Gemini-Key, Port)."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

    dialogflow_project_id: str = Field("", alias="DIALOGFLOW_PROJECT_ID")  # Muss per Env gesetzt werden.
    dialogflow_language_code: str = Field("en-US", alias="DIALOGFLOW_LANGUAGE_CODE")

    # Credentials: Pfad, Inline-JSON oder Base64-JSON (Base64 hat Vorrang).
    google_application_credentials: str = Field("", alias="GOOGLE_APPLICATION_CREDENTIALS")
    google_credentials_json: str = Field("", alias="GOOGLE_CREDENTIALS_JSON")
    google_credentials_base64: str = Field("", alias="GOOGLE_CREDENTIALS_BASE64")

    gemini_api_key: str = Field("", alias="GEMINI_API_KEY")
    gemini_model: str = Field("gemini-1.5-flash-latest", alias="GEMINI_MODEL")
    gemini_api_base: str = Field(
        "https://generativelanguage.googleapis.com/v1beta", alias="GEMINI_API_BASE"
    )
    gemini_timeout: float = Field(30.0, alias="GEMINI_TIMEOUT")

    port: int = Field(3000, alias="PORT")
    log_file: str = Field("chatbot.log", alias="LOG_FILE")


settings = Settings()
