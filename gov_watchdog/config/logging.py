"""Logging setup for scripts and services that embed the pipeline."""
import logging
from typing import Optional

from gov_watchdog.config.settings import Settings, get_settings


def setup_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure root logging from LOG_LEVEL and LOG_FORMAT.

    Safe to call more than once; later calls replace the handlers.
    """
    settings = settings or get_settings()
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    logging.basicConfig(level=level, format=settings.LOG_FORMAT, force=True)

    # httpx logs every request at INFO, which includes api_key query params
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
