"""
Lobbying Ingester - fetch lobbying disclosures from OpenSecrets.

API docs: https://www.opensecrets.org/open-data/api-documentation

Usage:
    ingester = LobbyingIngester(settings)
    result = await ingester.fetch(year=2024)
"""
from datetime import datetime
from typing import Any, Dict, List, Optional

from gov_watchdog.config.constants import (
    LOBBYING_REPORT_TYPE,
    OPENSECRETS_BASE_URL,
    OPENSECRETS_LOBBYING_METHOD,
)
from gov_watchdog.ingestion.base import BaseIngester, ProviderRequest
from gov_watchdog.ingestion.normalization import clean_text, parse_amount
from gov_watchdog.models.lobbying import LobbyingRecord


class LobbyingIngester(BaseIngester[LobbyingRecord]):
    """
    Ingest lobbying client reports from the OpenSecrets API.

    OpenSecrets wraps each entry's fields in an "@attributes" object and
    returns a bare object instead of a list when there is a single match;
    both are unwrapped here.
    """

    source = "opensecrets_lobbying"
    api_key_setting = "OPENSECRETS_API_KEY"

    def resolve_params(self, year: Optional[int] = None, **kwargs) -> Dict[str, Any]:
        return {"year": year or self.clock().year, **kwargs}

    def build_request(self, year: int, **params) -> ProviderRequest:
        return ProviderRequest(
            "GET",
            OPENSECRETS_BASE_URL,
            params={
                "method": OPENSECRETS_LOBBYING_METHOD,
                "apikey": self.api_key,
                "year": year,
                "output": "json",
            },
        )

    def extract_items(self, payload: Any, **params) -> List[Any]:
        data = self.require_mapping(payload, "$")
        response = self.require_mapping(data.get("response"), "response")
        clients = response.get("lob_client")
        if isinstance(clients, dict):
            return [clients]
        return self.require_list(clients, "response.lob_client")

    def transform(self, raw: dict, fetched_at: datetime, year: int = 0, **params) -> LobbyingRecord:
        """
        Transform an OpenSecrets lobbying entry into a LobbyingRecord.

        Amounts that are not plain whole numbers are recorded as 0 so one
        odd filing does not drop the batch.
        """
        attributes = raw.get("@attributes")
        fields = attributes if isinstance(attributes, dict) else raw

        return LobbyingRecord(
            client_name=clean_text(fields.get("client")),
            registrant_name=clean_text(fields.get("registrant")),
            amount=parse_amount(fields.get("total")),
            report_year=year,
            report_type=LOBBYING_REPORT_TYPE,
            issues=clean_text(fields.get("specific_issues")),
            updated_at=fetched_at,
        )
