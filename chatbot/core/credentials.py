"""Bootstrapping der Google-Service-Account-Credentials für den Dialogflow-Client.

Die Credentials können in drei gleichwertigen Formen vorliegen:

- ``GOOGLE_CREDENTIALS_BASE64``: Base64-kodiertes JSON (kanonische Form, z.B.
  für Hosting-Plattformen ohne Datei-Upload),
- ``GOOGLE_CREDENTIALS_JSON``: das JSON direkt in der Variable,
- ``GOOGLE_APPLICATION_CREDENTIALS``: Pfad zu einer Key-Datei.

Base64 und Inline-JSON werden in eine private temporäre Datei geschrieben, da
der Client einen Dateipfad erwartet. Ist nichts gesetzt, greifen die Google
Application Default Credentials.
"""
import atexit
import base64
import binascii
import json
import logging
import os
import tempfile
from typing import Optional

from chatbot.core.config import Settings

logger = logging.getLogger(__name__)


class CredentialsError(RuntimeError):
    """Die konfigurierten Credentials konnten nicht gelesen werden."""


def _parse_service_account(raw: str, source: str) -> dict:
    try:
        info = json.loads(raw)
    except ValueError as exc:
        raise CredentialsError(f"{source} does not contain valid JSON") from exc
    if not isinstance(info, dict):
        raise CredentialsError(f"{source} must contain a JSON object")
    return info


def decode_base64_credentials(encoded: str) -> dict:
    """Dekodiert Base64-JSON zu einem Service-Account-Dict; Zeilenumbrüche (z.B. aus `base64 key.json`) werden ignoriert."""
    try:
        raw = base64.b64decode("".join(encoded.split()), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as exc:
        raise CredentialsError("GOOGLE_CREDENTIALS_BASE64 is not valid base64") from exc
    return _parse_service_account(raw, "GOOGLE_CREDENTIALS_BASE64")


def write_credentials_file(info: dict) -> str:
    """Schreibt die Credentials in eine temporäre Datei (Modus 0600), die beim Prozessende gelöscht wird."""
    fd, path = tempfile.mkstemp(prefix="gcp-credentials-", suffix=".json")
    with os.fdopen(fd, "w", encoding="utf-8") as fh:
        json.dump(info, fh)
    atexit.register(remove_credentials_file, path)
    return path


def remove_credentials_file(path: str) -> None:
    """Löscht die temporäre Credential-Datei beim Beenden des Prozesses."""
    try:
        os.remove(path)
    except FileNotFoundError:
        pass


def resolve_credentials_file(settings: Settings) -> Optional[str]:
    """Liefert den Pfad zur Credential-Datei oder None für Default Credentials."""
    if settings.google_credentials_base64:
        info = decode_base64_credentials(settings.google_credentials_base64)
        path = write_credentials_file(info)
        logger.info(f"Loaded credentials from GOOGLE_CREDENTIALS_BASE64 into {path}")
        return path

    if settings.google_credentials_json:
        info = _parse_service_account(settings.google_credentials_json, "GOOGLE_CREDENTIALS_JSON")
        path = write_credentials_file(info)
        logger.info(f"Loaded credentials from GOOGLE_CREDENTIALS_JSON into {path}")
        return path

    if settings.google_application_credentials:
        path = settings.google_application_credentials
        if not os.path.isfile(path):
            raise CredentialsError(f"GOOGLE_APPLICATION_CREDENTIALS file not found: {path}")
        logger.info(f"Using credentials file {path}")
        return path

    logger.info("No credentials configured, falling back to Application Default Credentials")
    return None
