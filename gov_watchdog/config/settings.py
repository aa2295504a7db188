"""
Application settings using Pydantic Settings.

Environment variables are loaded from .env file.
"""
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application configuration loaded from environment variables.

    Create a .env file in the project root with these values.
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # ========================================================================
    # External APIs
    # ========================================================================

    # Congress.gov API (get key at: https://api.congress.gov/sign-up/)
    # Used for the member roster and legislation feeds
    CONGRESS_GOV_API_KEY: Optional[str] = None

    # ProPublica Congress API (detailed member info, sent as X-API-Key header)
    PROPUBLICA_API_KEY: Optional[str] = None

    # OpenSecrets API (lobbying filings)
    OPENSECRETS_API_KEY: Optional[str] = None

    # USAspending.gov needs no key today; kept so deployments can set one
    USASPENDING_API_KEY: Optional[str] = None

    # ========================================================================
    # HTTP behaviour
    # ========================================================================

    # Seconds before an outbound request is abandoned
    REQUEST_TIMEOUT: float = 30.0

    # Cooldown inserted before each provider call (milliseconds, 0 disables)
    RATE_LIMIT_DELAY_MS: int = 200

    # ========================================================================
    # Logging
    # ========================================================================
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # ========================================================================
    # Application
    # ========================================================================
    APP_NAME: str = "Gov Watchdog"
    APP_VERSION: str = "0.1.0"

    # Environment (development, staging, production)
    ENVIRONMENT: str = "development"


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loaded once on first use."""
    return Settings()
