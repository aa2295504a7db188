"""
Fetch outcome model.

Every adapter call produces a FetchResult: the canonical records plus enough
status for a caller to tell an empty provider answer from an unreachable one.
"""
from datetime import datetime
from enum import Enum
from typing import Generic, List, Optional, Sequence, TypeVar

from pydantic import BaseModel, ConfigDict, Field

RecordT = TypeVar("RecordT")


class FetchStatus(str, Enum):
    """Outcome of one provider call (or a merged group of calls)."""
    SUCCESS = "success"
    PARTIAL = "partial"
    FAILED = "failed"


class FetchResult(BaseModel, Generic[RecordT]):
    """
    Records returned by an adapter together with the call's outcome.

    `records` is always a list; a failed call simply has none.
    """
    model_config = ConfigDict(frozen=True)

    source: str
    status: FetchStatus = FetchStatus.SUCCESS
    records: List[RecordT] = Field(default_factory=list)

    # Entries dropped because they could not be projected
    skipped: int = 0
    error: Optional[str] = None

    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    @property
    def ok(self) -> bool:
        return self.status != FetchStatus.FAILED

    @classmethod
    def failure(
        cls,
        source: str,
        error: str,
        started_at: Optional[datetime] = None,
        completed_at: Optional[datetime] = None,
    ) -> "FetchResult":
        """Empty result for a call that did not produce usable data."""
        return cls(
            source=source,
            status=FetchStatus.FAILED,
            error=error,
            started_at=started_at,
            completed_at=completed_at,
        )

    @classmethod
    def merge(cls, source: str, results: Sequence["FetchResult"]) -> "FetchResult":
        """
        Combine sub-results into one, keeping record order.

        The merged status is SUCCESS when every part succeeded, FAILED when
        every part failed, and PARTIAL otherwise.
        """
        records: list = []
        for result in results:
            records.extend(result.records)

        statuses = {result.status for result in results}
        if not results or statuses == {FetchStatus.SUCCESS}:
            status = FetchStatus.SUCCESS
        elif statuses == {FetchStatus.FAILED}:
            status = FetchStatus.FAILED
        else:
            status = FetchStatus.PARTIAL

        errors = [f"{r.source}: {r.error}" for r in results if r.error]
        started = [r.started_at for r in results if r.started_at]
        completed = [r.completed_at for r in results if r.completed_at]

        return cls(
            source=source,
            status=status,
            records=records,
            skipped=sum(r.skipped for r in results),
            error="; ".join(errors) or None,
            started_at=min(started) if started else None,
            completed_at=max(completed) if completed else None,
        )
