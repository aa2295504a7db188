"""
Base ingester class shared by all provider adapters.

An ingester knows one provider: how to build its request, where the entries
sit in its response, and how to project one entry into a canonical record.
The base class owns everything else: issuing the single request, classifying
failures, and turning any failure into an empty FetchResult so one provider
going down never takes the others with it.
"""
from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, AsyncIterator, Callable, Dict, Generic, List, Optional, TypeVar
import logging

import httpx

from gov_watchdog.config.settings import Settings, get_settings
from gov_watchdog.ingestion.errors import (
    NetworkFailure,
    ParseFailure,
    ProviderError,
    UpstreamError,
)
from gov_watchdog.models.result import FetchResult, FetchStatus

T = TypeVar('T')


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ProviderRequest:
    """One outbound HTTP call."""
    method: str
    url: str
    params: Dict[str, Any] = field(default_factory=dict)
    headers: Dict[str, str] = field(default_factory=dict)
    json: Optional[Dict[str, Any]] = None


class BaseIngester(ABC, Generic[T]):
    """
    Base class for all provider adapters.

    Subclasses set `source` (used in logs and results) and, when the provider
    needs a credential, `api_key_setting` naming the Settings field to read.
    """

    source: str = "provider"
    api_key_setting: Optional[str] = None

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[httpx.AsyncClient] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Args:
            settings: Configuration; defaults to the process settings
            client: Shared HTTP client. When omitted, each fetch opens and
                    closes its own.
            clock: Returns the current time; used for refresh timestamps
                   and year defaults
        """
        self.logger = logging.getLogger(self.__class__.__name__)
        self.settings = settings or get_settings()
        self.client = client
        self.clock = clock or utc_now
        self.timeout = self.settings.REQUEST_TIMEOUT

        self.api_key: Optional[str] = None
        if self.api_key_setting:
            self.api_key = getattr(self.settings, self.api_key_setting)
            if not self.api_key:
                self.logger.warning(
                    f"{self.api_key_setting} is not set; {self.source} requests will likely be rejected"
                )

    # ------------------------------------------------------------------
    # Provider-specific hooks
    # ------------------------------------------------------------------

    def resolve_params(self, **kwargs) -> Dict[str, Any]:
        """
        Fill in defaults for fetch parameters.

        The resolved parameters are passed to every other hook, so a default
        such as "current year" is computed once per call.
        """
        return kwargs

    @abstractmethod
    def build_request(self, **params) -> ProviderRequest:
        """Build the provider request for these parameters."""

    @abstractmethod
    def extract_items(self, payload: Any, **params) -> List[Any]:
        """
        Pull the list of raw entries out of a decoded response body.

        Raises:
            ParseFailure: if the body does not have the provider's shape
        """

    @abstractmethod
    def transform(self, raw: dict, fetched_at: datetime, **params) -> T:
        """
        Project one raw entry into a canonical record.

        Raises:
            ValueError: if the entry cannot identify a record (including
                        pydantic ValidationError)
        """

    async def fetch_data(self, client: httpx.AsyncClient, **params) -> List[Any]:
        """
        Fetch raw entries from the provider.

        One request by default; override for providers that page.
        """
        payload = await self.request(client, self.build_request(**params))
        return self.extract_items(payload, **params)

    # ------------------------------------------------------------------
    # Shared machinery
    # ------------------------------------------------------------------

    @asynccontextmanager
    async def _client(self) -> AsyncIterator[httpx.AsyncClient]:
        if self.client is not None:
            yield self.client
        else:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                yield client

    async def request(self, client: httpx.AsyncClient, req: ProviderRequest) -> Any:
        """
        Issue one request and decode its JSON body.

        Raises:
            NetworkFailure: transport error
            UpstreamError: non-2xx status or timeout
            ParseFailure: body is not JSON
        """
        # Params are left out of the log line; they carry API keys
        self.logger.debug(f"{req.method} {req.url}")

        try:
            response = await client.request(
                req.method,
                req.url,
                params=req.params or None,
                headers=req.headers or None,
                json=req.json,
                timeout=self.timeout,
            )
            response.raise_for_status()
        except httpx.TimeoutException as e:
            raise UpstreamError(self.source, f"request timed out ({type(e).__name__})") from e
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            raise UpstreamError(self.source, f"HTTP {status_code}", status_code=status_code) from e
        except httpx.HTTPError as e:
            raise NetworkFailure(self.source, f"{type(e).__name__}: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            raise ParseFailure(self.source, f"response is not valid JSON: {e}") from e

    def require_list(self, value: Any, where: str) -> List[Any]:
        """
        Validate a container of entries.

        A missing container means the provider had nothing to report; any
        non-list value is a shape mismatch.
        """
        if value is None:
            return []
        if not isinstance(value, list):
            raise ParseFailure(self.source, f"expected a list at '{where}', got {type(value).__name__}")
        return value

    def require_mapping(self, value: Any, where: str) -> Dict[str, Any]:
        if value is None:
            return {}
        if not isinstance(value, dict):
            raise ParseFailure(self.source, f"expected an object at '{where}', got {type(value).__name__}")
        return value

    async def fetch(self, **kwargs) -> FetchResult[T]:
        """
        Run one fetch-and-normalize cycle.

        Never raises for provider problems: network, status and parse
        failures are logged and produce an empty result with status FAILED.
        Entries that cannot be projected are skipped and counted.
        """
        params = self.resolve_params(**kwargs)
        started_at = self.clock()

        try:
            async with self._client() as client:
                raw_items = await self.fetch_data(client, **params)
        except ProviderError as e:
            completed_at = self.clock()
            self.logger.error(
                f"{self.source} fetch failed: {e.message}",
                extra={
                    "source": self.source,
                    "error_type": type(e).__name__,
                    "status_code": getattr(e, "status_code", None),
                    "params": params,
                },
            )
            return FetchResult.failure(
                self.source,
                f"{type(e).__name__}: {e.message}",
                started_at=started_at,
                completed_at=completed_at,
            )

        records: List[T] = []
        skipped = 0
        for index, raw in enumerate(raw_items):
            if not isinstance(raw, dict):
                skipped += 1
                self.logger.warning(f"Skipping {self.source} entry {index}: not an object")
                continue
            try:
                records.append(self.transform(raw, started_at, **params))
            except ValueError as e:
                skipped += 1
                self.logger.warning(f"Skipping {self.source} entry {index}: {e}")

        completed_at = self.clock()
        self.logger.info(
            f"{self.source}: {len(records)} records, {skipped} skipped",
            extra={"source": self.source, "records": len(records), "skipped": skipped},
        )

        return FetchResult(
            source=self.source,
            status=FetchStatus.PARTIAL if skipped else FetchStatus.SUCCESS,
            records=records,
            skipped=skipped,
            started_at=started_at,
            completed_at=completed_at,
        )
