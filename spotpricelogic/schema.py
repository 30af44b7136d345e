from __future__ import annotations
from datetime import datetime

from pydantic import BaseModel, Field, field_validator


class RawPriceRecord(BaseModel):
    """One entry of the provider's JSON payload (extra fields are ignored)."""

    sek_per_kwh: float = Field(alias="SEK_per_kWh")
    time_start: datetime
    time_end: datetime | None = None
    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("time_start", "time_end")
    @classmethod
    def _tz_aware(cls, v: datetime | None) -> datetime | None:
        if v is not None and v.tzinfo is None:
            raise ValueError("timestamp must carry a UTC offset")
        return v
