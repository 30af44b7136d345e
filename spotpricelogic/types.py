from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Tuple, TypedDict


class Zone(str, Enum):
    """Swedish bidding zones served by the price provider."""

    SE1 = "SE1"  # Luleå
    SE2 = "SE2"  # Sundsvall
    SE3 = "SE3"  # Stockholm
    SE4 = "SE4"  # Malmö


class Continuation(Enum):
    """How a series relates to the day it is meant to follow."""

    CONTINUES = "continues"  # starts on the next calendar day
    SAME_DAY = "same_day"  # provider echoed the requested day back
    UNRELATED = "unrelated"  # empty, or any other day


@dataclass(frozen=True)
class PricePoint:
    time_start: datetime  # tz-aware, hour aligned
    price_per_kwh: float

    @property
    def time_end(self) -> datetime:
        return self.time_start + timedelta(hours=1)


# Ordered, immutable snapshot of price points
PriceSeries = Tuple[PricePoint, ...]


@dataclass(frozen=True)
class ChargingWindowResult:
    start: datetime
    mean_price_per_kwh: float
    hours: int


class PriceSummary(TypedDict):
    min: PricePoint
    max: PricePoint
    mean: float
    count: int
