"""
Pydantic model for federal spending awards from USAspending.gov.
"""
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SpendingRecord(BaseModel):
    """
    A federal award (or agency total, depending on the grouping requested).
    """
    model_config = ConfigDict(frozen=True)

    agency_name: Optional[str] = Field(None, description="Awarding agency")
    recipient_name: Optional[str] = None

    # Kept at the precision the provider reports
    amount: Optional[Decimal] = Field(None, description="Award amount in dollars")

    award_type: Optional[str] = None
    description: Optional[str] = None
    date_signed: Optional[str] = None

    fiscal_year: int
