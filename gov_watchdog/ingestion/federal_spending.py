"""
USAspending.gov Ingester - federal spending for one calendar year.

API docs: https://api.usaspending.gov/docs/endpoints

The spending explorer endpoint takes a POST with a JSON filter body and
needs no API key.
"""
from datetime import datetime
from typing import Any, Dict, List, Optional

from gov_watchdog.config.constants import (
    SPENDING_CATEGORY,
    SPENDING_RESULT_LIMIT,
    USASPENDING_BASE_URL,
)
from gov_watchdog.ingestion.base import BaseIngester, ProviderRequest
from gov_watchdog.ingestion.normalization import clean_text, parse_decimal, parse_int
from gov_watchdog.models.spending import SpendingRecord


class FederalSpendingIngester(BaseIngester[SpendingRecord]):
    """
    Ingest federal awards grouped by awarding agency.
    """

    source = "usaspending"

    def resolve_params(self, year: Optional[int] = None, **kwargs) -> Dict[str, Any]:
        return {"year": year or self.clock().year, **kwargs}

    def build_request(self, year: int, **params) -> ProviderRequest:
        body = {
            "filters": {
                "time_period": [
                    {
                        "start_date": f"{year}-01-01",
                        "end_date": f"{year}-12-31",
                    }
                ]
            },
            "category": SPENDING_CATEGORY,
            "limit": SPENDING_RESULT_LIMIT,
        }
        return ProviderRequest(
            "POST",
            f"{USASPENDING_BASE_URL}/spending/",
            headers={"Content-Type": "application/json"},
            json=body,
        )

    def extract_items(self, payload: Any, **params) -> List[Any]:
        data = self.require_mapping(payload, "$")
        return self.require_list(data.get("results"), "results")

    def transform(self, raw: dict, fetched_at: datetime, year: int = 0, **params) -> SpendingRecord:
        """
        Transform a USAspending result into a SpendingRecord.

        Award-level keys are preferred; category-grouped results only carry
        "name" and "amount". The fiscal year falls back to the requested
        period, which is the current calendar year unless the caller chose one.
        """
        amount = raw.get("Award_Amount")
        if amount is None:
            amount = raw.get("amount")

        fiscal_year = parse_int(raw.get("fiscal_year", raw.get("Fiscal_Year")))

        return SpendingRecord(
            agency_name=clean_text(raw.get("Agency")) or clean_text(raw.get("name")),
            recipient_name=clean_text(raw.get("Recipient")),
            amount=parse_decimal(amount),
            award_type=clean_text(raw.get("Award_Type")),
            description=clean_text(raw.get("Description")),
            date_signed=clean_text(raw.get("Start_Date")),
            fiscal_year=fiscal_year if fiscal_year is not None else (year or fetched_at.year),
        )
