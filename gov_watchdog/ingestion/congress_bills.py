"""
Ingester for recently updated bills from the Congress.gov API.

API Docs: https://api.congress.gov/
"""
from datetime import datetime
from typing import Any, List

from gov_watchdog.config.constants import BILL_PAGE_LIMIT, BILL_SORT, CONGRESS_GOV_BASE_URL
from gov_watchdog.ingestion.base import BaseIngester, ProviderRequest
from gov_watchdog.ingestion.normalization import clean_text, parse_int
from gov_watchdog.models.legislation import (
    LegislationRecord,
    derive_bill_status,
    make_bill_id,
)


class CongressBillsIngester(BaseIngester[LegislationRecord]):
    """
    Fetch the most recently updated bills across all Congresses.
    """

    source = "congress_bills"
    api_key_setting = "CONGRESS_GOV_API_KEY"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.base_url = CONGRESS_GOV_BASE_URL

    def build_request(self, **params) -> ProviderRequest:
        return ProviderRequest(
            "GET",
            f"{self.base_url}/bill",
            params={
                "api_key": self.api_key,
                "limit": BILL_PAGE_LIMIT,
                "format": "json",
                "sort": BILL_SORT,
            },
        )

    def extract_items(self, payload: Any, **params) -> List[Any]:
        data = self.require_mapping(payload, "$")
        return self.require_list(data.get("bills"), "bills")

    def transform(self, raw: dict, fetched_at: datetime, **params) -> LegislationRecord:
        """
        Transform a Congress.gov bill entry into a LegislationRecord.

        The bill type keeps the provider's casing ("HR" from the live API).
        """
        congress = parse_int(raw.get("congress"))
        bill_type = clean_text(raw.get("type"))
        number = parse_int(raw.get("number"))
        if congress is None or bill_type is None or number is None:
            raise ValueError(
                f"bill is missing congress/type/number "
                f"({raw.get('congress')!r}, {raw.get('type')!r}, {raw.get('number')!r})"
            )

        latest_action = raw.get("latestAction")
        if not isinstance(latest_action, dict):
            latest_action = {}
        action_text = clean_text(latest_action.get("text"))

        sponsor_id = None
        sponsors = raw.get("sponsors")
        if isinstance(sponsors, list) and sponsors and isinstance(sponsors[0], dict):
            sponsor_id = clean_text(sponsors[0].get("bioguideId"))

        return LegislationRecord(
            bill_id=make_bill_id(congress, bill_type, number),
            congress=congress,
            bill_type=bill_type,
            number=number,
            title=clean_text(raw.get("title")),
            introduced_date=clean_text(raw.get("introducedDate")),
            latest_action=action_text,
            latest_action_date=clean_text(latest_action.get("actionDate")),
            sponsor_id=sponsor_id,
            status=derive_bill_status(action_text),
            updated_at=fetched_at,
        )
