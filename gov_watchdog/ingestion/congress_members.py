"""
Ingester for the member roster from the Congress.gov API.

API Docs: https://api.congress.gov/
"""
from datetime import datetime
from typing import Any, List, Optional, Tuple

import httpx

from gov_watchdog.config.constants import CONGRESS_GOV_BASE_URL, MEMBER_PAGE_LIMIT
from gov_watchdog.ingestion.base import BaseIngester, ProviderRequest
from gov_watchdog.ingestion.normalization import (
    clean_text,
    normalize_chamber,
    normalize_state,
    parse_int,
)
from gov_watchdog.models.legislator import Chamber, LegislatorRecord


def latest_term(terms: Any) -> Optional[dict]:
    """
    Return the member's most recent term.

    Congress.gov nests terms as {"item": [...]} in some responses and as a
    bare list in others. Terms are ordered by start year; when start years
    are missing the last entry wins.
    """
    if isinstance(terms, dict):
        terms = terms.get("item")
    if not isinstance(terms, list):
        return None

    items = [term for term in terms if isinstance(term, dict)]
    if not items:
        return None

    ordered = sorted(items, key=lambda term: parse_int(term.get("startYear")) or 0)
    return ordered[-1]


def is_in_office(term: Optional[dict], current_year: int) -> bool:
    """
    Decide whether a member is serving, from their latest term.

    Only a term whose end year is this year or later counts as in office; a
    missing or unreadable end year does not.
    """
    if term is None:
        return False
    end_year = parse_int(term.get("endYear"))
    return end_year is not None and end_year >= current_year


def split_name(raw: dict) -> Tuple[Optional[str], Optional[str]]:
    """
    Get (first, last) from a member entry.

    Prefers the explicit fields; the roster list only has "Last, First".
    """
    first_name = clean_text(raw.get("firstName"))
    last_name = clean_text(raw.get("lastName"))
    if first_name or last_name:
        return first_name, last_name

    full_name_raw = clean_text(raw.get("name"))
    if not full_name_raw:
        return None, None
    if ", " in full_name_raw:
        last, first = full_name_raw.split(", ", 1)
        return first.strip() or None, last.strip() or None

    name_parts = full_name_raw.split()
    first = name_parts[0] if name_parts else None
    last = name_parts[-1] if len(name_parts) > 1 else None
    return first, last


class CongressMembersIngester(BaseIngester[LegislatorRecord]):
    """
    Fetch the Congress.gov member roster.

    Usage:
        ingester = CongressMembersIngester(settings)
        result = await ingester.fetch()
    """

    source = "congress_members"
    api_key_setting = "CONGRESS_GOV_API_KEY"

    def __init__(self, *args, max_pages: int = 1, **kwargs):
        """
        Args:
            max_pages: Number of 250-member pages to walk (default one page)
        """
        super().__init__(*args, **kwargs)
        self.base_url = CONGRESS_GOV_BASE_URL
        self.max_pages = max_pages

    def build_request(self, offset: int = 0, **params) -> ProviderRequest:
        request_params = {
            "api_key": self.api_key,
            "limit": MEMBER_PAGE_LIMIT,
            "format": "json",
        }
        if offset:
            request_params["offset"] = offset
        return ProviderRequest("GET", f"{self.base_url}/member", params=request_params)

    def extract_items(self, payload: Any, **params) -> List[Any]:
        data = self.require_mapping(payload, "$")
        return self.require_list(data.get("members"), "members")

    async def fetch_data(self, client: httpx.AsyncClient, **params) -> List[Any]:
        members: List[Any] = []
        offset = 0

        for page in range(1, self.max_pages + 1):
            payload = await self.request(client, self.build_request(offset=offset, **params))
            batch = self.extract_items(payload, **params)
            members.extend(batch)
            self.logger.debug(f"Page {page}: {len(batch)} members")

            pagination = payload.get("pagination") if isinstance(payload, dict) else None
            if len(batch) < MEMBER_PAGE_LIMIT or not isinstance(pagination, dict) or not pagination.get("next"):
                break
            offset += MEMBER_PAGE_LIMIT

        return members

    def transform(self, raw: dict, fetched_at: datetime, **params) -> LegislatorRecord:
        """
        Transform a Congress.gov member entry into a LegislatorRecord.
        """
        bioguide_id = clean_text(raw.get("bioguideId"))
        if not bioguide_id:
            raise ValueError("missing bioguideId")

        term = latest_term(raw.get("terms"))
        chamber = normalize_chamber(term.get("chamber")) if term else Chamber.UNKNOWN

        # Senators have no district
        district = None if chamber == Chamber.SENATE else parse_int(raw.get("district"))

        first_name, last_name = split_name(raw)

        return LegislatorRecord(
            bioguide_id=bioguide_id,
            first_name=first_name,
            last_name=last_name,
            party=clean_text(raw.get("partyName")),
            state=normalize_state(raw.get("state")),
            chamber=chamber,
            district=district,
            in_office=is_in_office(term, fetched_at.year),
            contact=clean_text(raw.get("officialWebsiteUrl")),
            updated_at=fetched_at,
        )
