"""
Legislator data models.

Defines the canonical shapes for members of Congress as reported by the
Congress.gov roster and the ProPublica member lists.
"""
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Chamber(str, Enum):
    """Legislative chamber."""
    HOUSE = "house"
    SENATE = "senate"
    UNKNOWN = "unknown"


class LegislatorRecord(BaseModel):
    """
    A federal legislator from the Congress.gov member roster.
    """
    model_config = ConfigDict(frozen=True)

    # Unique identifier (bioguide_id from Congress.gov)
    bioguide_id: str = Field(..., description="Provider-assigned ID, stable across refreshes")

    # Basic info
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    # Political info
    party: Optional[str] = None
    state: Optional[str] = Field(None, description="Two-letter state/territory code")
    chamber: Chamber = Chamber.UNKNOWN
    district: Optional[int] = Field(None, description="House district number (None for Senators)")

    # Status
    in_office: bool = False

    # Website or phone, whichever the provider offers
    contact: Optional[str] = None

    # Metadata
    updated_at: datetime

    def __str__(self) -> str:
        """Human-readable representation."""
        chamber_title = "Sen." if self.chamber == Chamber.SENATE else "Rep."
        name = " ".join(part for part in (self.first_name, self.last_name) if part)
        district_str = f" (District {self.district})" if self.district else ""
        return f"{chamber_title} {name or self.bioguide_id} ({self.party or '?'}-{self.state or '?'}){district_str}"


class LegislatorDetailRecord(LegislatorRecord):
    """
    Detailed member info from ProPublica.

    Produced independently of LegislatorRecord; callers that want a combined
    view join the two on bioguide_id themselves.
    """
    # ProPublica reports its own flag; absent when the provider omits it
    in_office: Optional[bool] = None

    phone: Optional[str] = None
    twitter_handle: Optional[str] = None
    next_election: Optional[str] = None
