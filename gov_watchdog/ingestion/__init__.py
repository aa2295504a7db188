"""Ingestion module - one adapter per external provider."""

from gov_watchdog.ingestion.base import BaseIngester, ProviderRequest
from gov_watchdog.ingestion.congress_bills import CongressBillsIngester
from gov_watchdog.ingestion.congress_members import CongressMembersIngester
from gov_watchdog.ingestion.errors import (
    NetworkFailure,
    ParseFailure,
    ProviderError,
    UpstreamError,
)
from gov_watchdog.ingestion.federal_spending import FederalSpendingIngester
from gov_watchdog.ingestion.lobbying import LobbyingIngester
from gov_watchdog.ingestion.pacing import RatePacer
from gov_watchdog.ingestion.propublica_members import ProPublicaMembersIngester

__all__ = [
    "BaseIngester",
    "ProviderRequest",
    "CongressBillsIngester",
    "CongressMembersIngester",
    "FederalSpendingIngester",
    "LobbyingIngester",
    "ProPublicaMembersIngester",
    "RatePacer",
    # Errors
    "ProviderError",
    "NetworkFailure",
    "UpstreamError",
    "ParseFailure",
]
