from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, field_validator


class IngestionClock(BaseModel, frozen=True):
    """Timestamp source for one ingestion run.

    Every identity and note created during the run is stamped with `now`, so
    a run is reproducible when the clock is pinned.
    """

    now: datetime

    @field_validator('now')
    @classmethod
    def now_must_be_timezone_aware(cls, value: datetime) -> datetime:
        if value.tzinfo is None or value.utcoffset() is None:
            raise ValueError('IngestionClock value must be timezone-aware')
        return value

    @classmethod
    def utcnow(cls) -> IngestionClock:
        return cls(now=datetime.now(timezone.utc))
