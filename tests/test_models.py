"""Tests for canonical record models and derivation rules."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from gov_watchdog.models import (
    BillStatus,
    Chamber,
    FetchResult,
    FetchStatus,
    LegislatorDetailRecord,
    LegislatorRecord,
    derive_bill_status,
    make_bill_id,
)

NOW = datetime(2026, 3, 15, tzinfo=timezone.utc)


class TestBillDerivations:
    """Test composite bill id and status rules."""

    def test_make_bill_id(self):
        assert make_bill_id(118, "hr", 1234) == "118-hr-1234"

    def test_enacted_status(self):
        status = derive_bill_status("Signed by President. Enacted as Public Law 118-1.")
        assert status == BillStatus.ENACTED
        assert status.value == "Enacted"

    def test_in_progress_status(self):
        status = derive_bill_status("Referred to Committee")
        assert status == BillStatus.IN_PROGRESS
        assert status.value == "In Progress"

    def test_status_match_is_case_sensitive(self):
        assert derive_bill_status("enacted by voice vote") == BillStatus.IN_PROGRESS

    def test_missing_action_is_in_progress(self):
        assert derive_bill_status(None) == BillStatus.IN_PROGRESS


class TestLegislatorRecords:
    """Test legislator record shapes."""

    def test_records_are_immutable(self):
        record = LegislatorRecord(bioguide_id="L000577", updated_at=NOW)

        with pytest.raises(ValidationError):
            record.party = "Republican"

    def test_optional_fields_default_to_absent(self):
        record = LegislatorRecord(bioguide_id="L000577", updated_at=NOW)

        assert record.first_name is None
        assert record.district is None
        assert record.contact is None
        assert record.chamber == Chamber.UNKNOWN
        assert record.in_office is False

    def test_identifier_is_required(self):
        with pytest.raises(ValidationError):
            LegislatorRecord(updated_at=NOW)

    def test_detail_record_extends_roster_record(self):
        record = LegislatorDetailRecord(
            bioguide_id="L000577",
            twitter_handle="SenMikeLee",
            updated_at=NOW,
        )

        assert isinstance(record, LegislatorRecord)
        assert record.in_office is None
        assert record.twitter_handle == "SenMikeLee"

    def test_timestamp_serializes_as_iso(self):
        record = LegislatorRecord(bioguide_id="L000577", updated_at=NOW)

        dumped = record.model_dump(mode="json")

        assert dumped["updated_at"].startswith("2026-03-15T00:00:00")
        assert dumped["chamber"] == "unknown"


class TestFetchResult:
    """Test outcome merging."""

    def _result(self, source, status, count=0):
        records = [LegislatorRecord(bioguide_id=f"{source}{i}", updated_at=NOW) for i in range(count)]
        error = "UpstreamError: HTTP 500" if status == FetchStatus.FAILED else None
        return FetchResult(source=source, status=status, records=records, error=error)

    def test_merge_keeps_order(self):
        merged = FetchResult.merge(
            "members",
            [self._result("h", FetchStatus.SUCCESS, 2), self._result("s", FetchStatus.SUCCESS, 1)],
        )

        assert [r.bioguide_id for r in merged.records] == ["h0", "h1", "s0"]
        assert merged.status == FetchStatus.SUCCESS
        assert merged.error is None

    def test_merge_one_failed_is_partial(self):
        merged = FetchResult.merge(
            "members",
            [self._result("h", FetchStatus.SUCCESS, 3), self._result("s", FetchStatus.FAILED)],
        )

        assert len(merged.records) == 3
        assert merged.status == FetchStatus.PARTIAL
        assert merged.error == "s: UpstreamError: HTTP 500"

    def test_merge_all_failed(self):
        merged = FetchResult.merge(
            "members",
            [self._result("h", FetchStatus.FAILED), self._result("s", FetchStatus.FAILED)],
        )

        assert merged.records == []
        assert merged.status == FetchStatus.FAILED
        assert not merged.ok

    def test_failure_has_empty_records(self):
        result = FetchResult.failure("usaspending", "NetworkFailure: boom")

        assert result.records == []
        assert result.status == FetchStatus.FAILED
