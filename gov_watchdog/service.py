"""
Government data service - the single entry point for all provider feeds.

Composes the rate pacer with the five provider ingesters and exposes one
method per domain. Each method is a stateless request/response cycle; the
only state held is the configuration captured at construction.

Usage:
    service = GovernmentDataService(settings)
    members = await service.fetch_congress_members()
    results = await service.sync_all()
"""
import asyncio
import logging
from datetime import datetime
from typing import Callable, Dict, List, Optional

import httpx

from gov_watchdog.config.constants import PROPUBLICA_CHAMBERS
from gov_watchdog.config.settings import Settings, get_settings
from gov_watchdog.ingestion.base import BaseIngester, utc_now
from gov_watchdog.ingestion.congress_bills import CongressBillsIngester
from gov_watchdog.ingestion.congress_members import CongressMembersIngester
from gov_watchdog.ingestion.federal_spending import FederalSpendingIngester
from gov_watchdog.ingestion.lobbying import LobbyingIngester
from gov_watchdog.ingestion.pacing import RatePacer
from gov_watchdog.ingestion.propublica_members import ProPublicaMembersIngester
from gov_watchdog.models import (
    FetchResult,
    LegislationRecord,
    LegislatorDetailRecord,
    LegislatorRecord,
    LobbyingRecord,
    SpendingRecord,
)

logger = logging.getLogger(__name__)


class GovernmentDataService:
    """
    Aggregation façade over the provider ingesters.

    Methods never raise for provider problems: an unreachable or misbehaving
    provider contributes an empty list. The `*_result` variants return the
    full FetchResult so callers can tell "no data" from "provider down".
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[httpx.AsyncClient] = None,
        pacer: Optional[RatePacer] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Args:
            settings: Credentials and HTTP configuration
            client: Shared HTTP client (owned by the caller, never closed here)
            pacer: Delay inserted before each provider call; defaults to
                   RATE_LIMIT_DELAY_MS from settings
            clock: Current-time source for timestamps and year defaults
        """
        self.settings = settings or get_settings()
        self.clock = clock or utc_now
        self.pacer = pacer or RatePacer(delay_ms=self.settings.RATE_LIMIT_DELAY_MS)

        common = {"settings": self.settings, "client": client, "clock": self.clock}
        self.members = CongressMembersIngester(**common)
        self.member_details = ProPublicaMembersIngester(**common)
        self.lobbying = LobbyingIngester(**common)
        self.spending = FederalSpendingIngester(**common)
        self.legislation = CongressBillsIngester(**common)

    async def _run(self, ingester: BaseIngester, **params) -> FetchResult:
        """
        Pace, then run one ingester call.

        Ingesters already turn provider failures into empty results; anything
        else that escapes is logged and handled the same way.
        """
        await self.pacer.pace()
        try:
            return await ingester.fetch(**params)
        except Exception as e:
            logger.error(
                f"Unexpected error from {ingester.source}: {e}",
                exc_info=True,
                extra={"source": ingester.source, "error_type": type(e).__name__},
            )
            return FetchResult.failure(ingester.source, f"{type(e).__name__}: {e}")

    # ------------------------------------------------------------------
    # Outcome-aware variants
    # ------------------------------------------------------------------

    async def fetch_congress_members_result(self) -> FetchResult[LegislatorRecord]:
        return await self._run(self.members)

    async def fetch_congress_details_result(self) -> FetchResult[LegislatorDetailRecord]:
        """
        Fetch both chambers concurrently and merge them, house first.

        Waits for both calls to settle; a chamber that fails contributes no
        records and marks the merged result PARTIAL.
        """
        outcomes = await asyncio.gather(
            *(self._run(self.member_details, chamber=chamber) for chamber in PROPUBLICA_CHAMBERS),
            return_exceptions=True,
        )

        results: List[FetchResult] = []
        for chamber, outcome in zip(PROPUBLICA_CHAMBERS, outcomes):
            source = f"{self.member_details.source}.{chamber}"
            if isinstance(outcome, BaseException):
                logger.error(
                    f"{source} did not complete: {outcome!r}",
                    extra={"source": source, "error_type": type(outcome).__name__},
                )
                results.append(FetchResult.failure(source, f"{type(outcome).__name__}: {outcome}"))
            else:
                results.append(outcome.model_copy(update={"source": source}))

        return FetchResult.merge(self.member_details.source, results)

    async def fetch_lobbying_data_result(self, year: Optional[int] = None) -> FetchResult[LobbyingRecord]:
        return await self._run(self.lobbying, year=year)

    async def fetch_federal_spending_result(self, year: Optional[int] = None) -> FetchResult[SpendingRecord]:
        return await self._run(self.spending, year=year)

    async def fetch_legislation_result(self) -> FetchResult[LegislationRecord]:
        return await self._run(self.legislation)

    # ------------------------------------------------------------------
    # Domain methods
    # ------------------------------------------------------------------

    async def fetch_congress_members(self) -> List[LegislatorRecord]:
        """Current member roster from Congress.gov."""
        return (await self.fetch_congress_members_result()).records

    async def fetch_congress_details(self) -> List[LegislatorDetailRecord]:
        """House and senate member details from ProPublica, in one list."""
        return (await self.fetch_congress_details_result()).records

    async def fetch_lobbying_data(self, year: Optional[int] = None) -> List[LobbyingRecord]:
        """Lobbying client reports for `year` (default: current year)."""
        return (await self.fetch_lobbying_data_result(year=year)).records

    async def fetch_federal_spending(self, year: Optional[int] = None) -> List[SpendingRecord]:
        """Federal spending for calendar year `year` (default: current year)."""
        return (await self.fetch_federal_spending_result(year=year)).records

    async def fetch_legislation(self) -> List[LegislationRecord]:
        """Most recently updated bills from Congress.gov."""
        return (await self.fetch_legislation_result()).records

    # ------------------------------------------------------------------
    # Everything at once
    # ------------------------------------------------------------------

    async def sync_all(self) -> Dict[str, FetchResult]:
        """
        Refresh every domain concurrently.

        Returns:
            FetchResult per domain, keyed members, member_details, lobbying,
            spending, legislation
        """
        started_at = self.clock()
        names = ["members", "member_details", "lobbying", "spending", "legislation"]
        results = await asyncio.gather(
            self.fetch_congress_members_result(),
            self.fetch_congress_details_result(),
            self.fetch_lobbying_data_result(),
            self.fetch_federal_spending_result(),
            self.fetch_legislation_result(),
        )
        summary = dict(zip(names, results))

        for name, result in summary.items():
            logger.info(
                f"{name}: {result.status.value}, {len(result.records)} records"
                + (f", {result.skipped} skipped" if result.skipped else "")
            )
        logger.info(f"Sync complete in {self.clock() - started_at}")

        return summary


def get_government_service(settings: Optional[Settings] = None) -> GovernmentDataService:
    """Get a GovernmentDataService instance."""
    return GovernmentDataService(settings=settings)
