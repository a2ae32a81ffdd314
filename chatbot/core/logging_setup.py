import logging
import sys
from typing import Optional

from chatbot.core.config import settings


def setup_logging(log_file: Optional[str] = None):
    """Configures logging to write to both console and a file."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(log_file or settings.log_file, mode="a", encoding="utf-8"),
        ],
    )
    # uvicorn bringt eigene Handler mit; sonst wird doppelt geloggt
    logging.getLogger("uvicorn").handlers = []
    logging.getLogger("uvicorn").propagate = True
    logging.getLogger("httpx").setLevel(logging.INFO)
    logging.getLogger("google").setLevel(logging.WARNING)
