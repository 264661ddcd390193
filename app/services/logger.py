from __future__ import annotations

import json
import logging
from datetime import datetime

from app.core.config import settings

_debug_logger = logging.getLogger("app.debug")


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once at startup."""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def log_debug(event: str, data: dict):
    """
    Logs structured debug info if enabled.
    """
    if not settings.AI_DEBUG_MODE:
        return

    entry = {
        "timestamp": datetime.now().isoformat(),
        "event": event,
        "data": data,
    }
    _debug_logger.info("[AI DEBUG] %s", json.dumps(entry, default=str))
