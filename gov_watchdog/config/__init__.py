"""Config module - settings, constants and logging."""

from gov_watchdog.config.settings import Settings, get_settings
from gov_watchdog.config.logging import setup_logging
from gov_watchdog.config.constants import (
    CONGRESS_GOV_BASE_URL,
    PROPUBLICA_BASE_URL,
    PROPUBLICA_CONGRESS,
)

__all__ = [
    "Settings",
    "get_settings",
    "setup_logging",
    "CONGRESS_GOV_BASE_URL",
    "PROPUBLICA_BASE_URL",
    "PROPUBLICA_CONGRESS",
]
