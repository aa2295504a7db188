"""
Pydantic model for lobbying disclosures.

Represents one client/registrant pairing reported to OpenSecrets.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from gov_watchdog.config.constants import LOBBYING_REPORT_TYPE


class LobbyingRecord(BaseModel):
    """
    Lobbying spend by a client through a registrant (lobbying firm).
    """
    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "client_name": "National Assn of Realtors",
                "registrant_name": "National Assn of Realtors",
                "amount": 50000,
                "report_year": 2024,
                "report_type": "Annual",
                "issues": "Housing finance reform",
                "updated_at": "2024-05-01T12:00:00Z",
            }
        },
    )

    client_name: Optional[str] = Field(None, description="Organization paying for lobbying")
    registrant_name: Optional[str] = Field(None, description="Lobbying firm that filed the report")

    # Whole currency units, cents truncated; unparseable provider amounts are recorded as 0
    amount: int = 0

    report_year: int
    report_type: str = LOBBYING_REPORT_TYPE
    issues: Optional[str] = Field(None, description="Specific issues lobbied on")

    updated_at: datetime
