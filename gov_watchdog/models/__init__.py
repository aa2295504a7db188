"""Data models module."""

from gov_watchdog.models.legislator import (
    Chamber,
    LegislatorRecord,
    LegislatorDetailRecord,
)

from gov_watchdog.models.legislation import (
    BillStatus,
    LegislationRecord,
    derive_bill_status,
    make_bill_id,
)

from gov_watchdog.models.lobbying import LobbyingRecord
from gov_watchdog.models.spending import SpendingRecord
from gov_watchdog.models.result import FetchResult, FetchStatus

__all__ = [
    # Legislators
    "Chamber",
    "LegislatorRecord",
    "LegislatorDetailRecord",
    # Legislation
    "BillStatus",
    "LegislationRecord",
    "derive_bill_status",
    "make_bill_id",
    # Money
    "LobbyingRecord",
    "SpendingRecord",
    # Outcomes
    "FetchResult",
    "FetchStatus",
]
