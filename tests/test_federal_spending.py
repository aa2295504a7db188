"""Tests for the USAspending ingester."""

import json
from decimal import Decimal

import httpx
import pytest

from gov_watchdog.ingestion.federal_spending import FederalSpendingIngester
from gov_watchdog.models import FetchStatus

SPENDING_PAYLOAD = {
    "results": [
        {
            "Agency": "Department of Defense",
            "Recipient": "Widget Works Inc",
            "Award_Amount": 1234567.89,
            "Award_Type": "Contract",
            "Description": "Widget procurement",
            "Start_Date": "2026-02-01",
        },
        {
            "Agency": "Department of Energy",
            "Recipient": "Grid Labs",
            "Award_Amount": "500000.00",
            "Award_Type": "Grant",
            "Description": "Grid research",
            "Start_Date": "2025-11-30",
            "fiscal_year": 2025,
        },
    ]
}


@pytest.fixture
def ingester_for(settings, clock, make_client):
    def _build(handler):
        return FederalSpendingIngester(settings=settings, client=make_client(handler), clock=clock)
    return _build


class TestFederalSpendingIngester:
    """Test fetching and projecting federal spending."""

    @pytest.mark.asyncio
    async def test_request_body(self, ingester_for, requests_seen):
        ingester = ingester_for(lambda request: httpx.Response(200, json={"results": []}))

        await ingester.fetch()

        request = requests_seen[0]
        assert request.method == "POST"
        assert str(request.url) == "https://api.usaspending.gov/api/v2/spending/"
        assert request.headers["Content-Type"] == "application/json"
        assert "X-API-Key" not in request.headers
        assert not request.url.params

        body = json.loads(request.content)
        assert body == {
            "filters": {"time_period": [{"start_date": "2026-01-01", "end_date": "2026-12-31"}]},
            "category": "awarding_agency",
            "limit": 100,
        }

    @pytest.mark.asyncio
    async def test_explicit_year(self, ingester_for, requests_seen):
        ingester = ingester_for(lambda request: httpx.Response(200, json={"results": []}))

        await ingester.fetch(year=2022)

        period = json.loads(requests_seen[0].content)["filters"]["time_period"][0]
        assert period == {"start_date": "2022-01-01", "end_date": "2022-12-31"}

    @pytest.mark.asyncio
    async def test_projects_awards(self, ingester_for):
        ingester = ingester_for(lambda request: httpx.Response(200, json=SPENDING_PAYLOAD))

        result = await ingester.fetch()

        assert result.status == FetchStatus.SUCCESS
        defense, energy = result.records

        assert defense.agency_name == "Department of Defense"
        assert defense.recipient_name == "Widget Works Inc"
        assert defense.amount == Decimal("1234567.89")
        assert defense.award_type == "Contract"
        assert defense.description == "Widget procurement"
        assert defense.date_signed == "2026-02-01"
        # No fiscal year reported: defaults to the current calendar year
        assert defense.fiscal_year == 2026

        assert energy.amount == Decimal("500000.00")
        assert energy.fiscal_year == 2025

    @pytest.mark.asyncio
    async def test_category_grouped_results(self, ingester_for):
        payload = {"results": [{"name": "Department of Education", "amount": 42.5, "type": "agency"}]}
        ingester = ingester_for(lambda request: httpx.Response(200, json=payload))

        result = await ingester.fetch()

        record = result.records[0]
        assert record.agency_name == "Department of Education"
        assert record.amount == Decimal("42.5")
        assert record.recipient_name is None
        assert record.date_signed is None

    @pytest.mark.asyncio
    async def test_non_finite_amount_keeps_record(self, ingester_for):
        payload = {"results": [
            {"Agency": "Department of Energy", "Award_Amount": "NaN"},
            {"Agency": "Department of Defense", "Award_Amount": 5},
        ]}
        ingester = ingester_for(lambda request: httpx.Response(200, json=payload))

        result = await ingester.fetch()

        assert [r.agency_name for r in result.records] == ["Department of Energy", "Department of Defense"]
        assert result.records[0].amount is None
        assert result.records[1].amount == Decimal("5")
        assert result.skipped == 0
        assert result.status == FetchStatus.SUCCESS

    @pytest.mark.asyncio
    async def test_bad_request_is_empty(self, ingester_for):
        ingester = ingester_for(
            lambda request: httpx.Response(422, json={"detail": "Missing value: 'type'"})
        )

        result = await ingester.fetch()

        assert result.records == []
        assert result.status == FetchStatus.FAILED

    @pytest.mark.asyncio
    async def test_wrong_shape_is_empty(self, ingester_for):
        ingester = ingester_for(lambda request: httpx.Response(200, json=["unexpected", "list"]))

        result = await ingester.fetch()

        assert result.records == []
        assert "ParseFailure" in result.error
