"""Group Schemas - Pydantic models with field-level validation for API boundaries.

Invariants:
    - GroupPayload requires all three mutable fields (no partial updates)
    - Timestamps are UTC-aware on both sides: naive input is read as UTC
    - arrival must not be later than departure
    - GroupResponse serializes timestamps as ISO-8601 strings

Design Decisions:
    - Date validation at the boundary: malformed dates become a 400,
      never a persisted sentinel value
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class GroupPayload(BaseModel):
    """Create/update body - full replacement of the mutable fields."""
    group_name: str = Field(min_length=1, max_length=255)
    arrival: datetime
    departure: datetime

    @field_validator("arrival", "departure")
    @classmethod
    def normalize_timezone(cls, v: datetime) -> datetime:
        return _as_utc(v)

    @model_validator(mode="after")
    def check_stay_order(self):
        if self.arrival > self.departure:
            raise ValueError("arrival must not be later than departure")
        return self


class GroupResponse(BaseModel):
    """Group response - public-facing group data."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    group_name: str
    arrival: datetime
    departure: datetime

    @field_validator("arrival", "departure")
    @classmethod
    def normalize_timezone(cls, v: datetime) -> datetime:
        # SQLite hands back naive values; stored values are always UTC
        return _as_utc(v)


class MessageResponse(BaseModel):
    message: str
