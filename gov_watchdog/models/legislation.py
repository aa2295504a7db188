"""
Legislation data models.

Defines the canonical bill record and the rules that derive its identifier
and status from Congress.gov data.
"""
from datetime import datetime
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class BillStatus(str, Enum):
    """Current status of a bill."""
    ENACTED = "Enacted"
    IN_PROGRESS = "In Progress"


def make_bill_id(congress: Union[int, str], bill_type: str, number: Union[int, str]) -> str:
    """
    Build the composite bill identifier.

    Examples:
        >>> make_bill_id(118, "hr", 1234)
        '118-hr-1234'
    """
    return f"{congress}-{bill_type}-{number}"


def derive_bill_status(latest_action: Optional[str]) -> BillStatus:
    """
    Classify a bill from its latest action text.

    The match is case-sensitive: only the literal token "Enacted" counts.
    """
    if latest_action and "Enacted" in latest_action:
        return BillStatus.ENACTED
    return BillStatus.IN_PROGRESS


class LegislationRecord(BaseModel):
    """
    A piece of federal legislation from the Congress.gov bill feed.
    """
    model_config = ConfigDict(frozen=True)

    # Unique identifier (e.g., "118-hr-1234")
    bill_id: str = Field(..., description="Unique ID: {congress}-{type}-{number}")

    # Basic info
    congress: int
    bill_type: str
    number: int

    # Content
    title: Optional[str] = None
    introduced_date: Optional[str] = None

    # Latest action
    latest_action: Optional[str] = None
    latest_action_date: Optional[str] = None

    # Sponsorship (links to LegislatorRecord.bioguide_id)
    sponsor_id: Optional[str] = None

    status: BillStatus = BillStatus.IN_PROGRESS

    # Metadata
    updated_at: datetime

    def __str__(self) -> str:
        """Human-readable representation."""
        title = (self.title or "")[:60]
        return f"{self.bill_type.upper()}. {self.number} ({self.congress}th Congress): {title}"
