"""Tests for settings and logging setup."""

import logging

import pytest

from gov_watchdog.config import Settings, get_settings, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSettings:
    """Test configuration defaults and environment loading."""

    def test_defaults(self, monkeypatch):
        for name in ("CONGRESS_GOV_API_KEY", "REQUEST_TIMEOUT", "RATE_LIMIT_DELAY_MS"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.CONGRESS_GOV_API_KEY is None
        assert settings.REQUEST_TIMEOUT == 30.0
        assert settings.RATE_LIMIT_DELAY_MS == 200

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("OPENSECRETS_API_KEY", "from-env")
        monkeypatch.setenv("RATE_LIMIT_DELAY_MS", "0")

        settings = get_settings()

        assert settings.OPENSECRETS_API_KEY == "from-env"
        assert settings.RATE_LIMIT_DELAY_MS == 0

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestSetupLogging:
    """Test root logger configuration."""

    def test_applies_level(self, restore_root_logger):
        setup_logging(Settings(_env_file=None, LOG_LEVEL="debug"))

        assert restore_root_logger.level == logging.DEBUG
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self, restore_root_logger):
        setup_logging(Settings(_env_file=None, LOG_LEVEL="chatty"))

        assert restore_root_logger.level == logging.INFO
