"""Shared test configuration and fixtures."""

from datetime import datetime, timezone
from typing import Callable, List

import httpx
import pytest

from gov_watchdog.config.settings import Settings, get_settings

FIXED_NOW = datetime(2026, 3, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def settings():
    """Settings with fake credentials and pacing disabled."""
    return Settings(
        _env_file=None,
        CONGRESS_GOV_API_KEY="test-congress-key",
        PROPUBLICA_API_KEY="test-propublica-key",
        OPENSECRETS_API_KEY="test-opensecrets-key",
        REQUEST_TIMEOUT=5.0,
        RATE_LIMIT_DELAY_MS=0,
    )


@pytest.fixture
def clock() -> Callable[[], datetime]:
    """Clock frozen at FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture
def requests_seen() -> List[httpx.Request]:
    """Every request a mock client handled, in order."""
    return []


@pytest.fixture
def make_client(requests_seen):
    """
    Build an AsyncClient whose transport is a handler function.

    The handler receives the httpx.Request and returns an httpx.Response
    (or raises an httpx error to simulate transport failures).
    """

    def _make(handler) -> httpx.AsyncClient:
        def _record(request: httpx.Request) -> httpx.Response:
            requests_seen.append(request)
            return handler(request)

        return httpx.AsyncClient(transport=httpx.MockTransport(_record))

    return _make


@pytest.fixture(autouse=True)
def clean_settings_cache():
    """Clear the settings cache between tests to avoid state pollution."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
