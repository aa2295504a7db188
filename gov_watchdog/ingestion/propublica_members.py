"""
Ingester for detailed member info from the ProPublica Congress API.

ProPublica serves one member list per chamber, so a full refresh is two
calls; GovernmentDataService issues them concurrently.
"""
from datetime import datetime
from typing import Any, Dict, List

from gov_watchdog.config.constants import (
    PROPUBLICA_BASE_URL,
    PROPUBLICA_CHAMBERS,
    PROPUBLICA_CONGRESS,
)
from gov_watchdog.ingestion.base import BaseIngester, ProviderRequest
from gov_watchdog.ingestion.normalization import (
    clean_text,
    normalize_chamber,
    normalize_state,
    parse_int,
)
from gov_watchdog.models.legislator import Chamber, LegislatorDetailRecord


class ProPublicaMembersIngester(BaseIngester[LegislatorDetailRecord]):
    """
    Fetch one chamber's members from ProPublica.

    Usage:
        ingester = ProPublicaMembersIngester(settings)
        house = await ingester.fetch(chamber="house")
    """

    source = "propublica_members"
    api_key_setting = "PROPUBLICA_API_KEY"

    def __init__(self, *args, congress: int = PROPUBLICA_CONGRESS, **kwargs):
        super().__init__(*args, **kwargs)
        self.base_url = PROPUBLICA_BASE_URL
        self.congress = congress

    def resolve_params(self, chamber: str = "house", **kwargs) -> Dict[str, Any]:
        chamber = chamber.lower()
        if chamber not in PROPUBLICA_CHAMBERS:
            raise ValueError(f"chamber must be one of {PROPUBLICA_CHAMBERS}, got {chamber!r}")
        return {"chamber": chamber, **kwargs}

    def build_request(self, chamber: str, **params) -> ProviderRequest:
        return ProviderRequest(
            "GET",
            f"{self.base_url}/{self.congress}/{chamber}/members.json",
            headers={"X-API-Key": self.api_key or ""},
        )

    def extract_items(self, payload: Any, **params) -> List[Any]:
        data = self.require_mapping(payload, "$")
        results = self.require_list(data.get("results"), "results")
        if not results:
            return []
        first = self.require_mapping(results[0], "results[0]")
        return self.require_list(first.get("members"), "results[0].members")

    def transform(self, raw: dict, fetched_at: datetime, chamber: str = "house", **params) -> LegislatorDetailRecord:
        """
        Transform a ProPublica member entry into a LegislatorDetailRecord.

        Member entries do not always repeat the chamber, so the chamber the
        list was requested for fills in.
        """
        member_id = clean_text(raw.get("id"))
        if not member_id:
            raise ValueError("missing id")

        member_chamber = normalize_chamber(raw.get("chamber") or chamber)
        district = None if member_chamber == Chamber.SENATE else parse_int(raw.get("district"))

        in_office = raw.get("in_office")
        phone = clean_text(raw.get("phone"))

        return LegislatorDetailRecord(
            bioguide_id=member_id,
            first_name=clean_text(raw.get("first_name")),
            last_name=clean_text(raw.get("last_name")),
            party=clean_text(raw.get("party")),
            state=normalize_state(raw.get("state")),
            chamber=member_chamber,
            district=district,
            in_office=in_office if isinstance(in_office, bool) else None,
            contact=clean_text(raw.get("url")) or phone,
            phone=phone,
            twitter_handle=clean_text(raw.get("twitter_account")),
            next_election=clean_text(raw.get("next_election")),
            updated_at=fetched_at,
        )
