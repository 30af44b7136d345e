from __future__ import annotations
from datetime import datetime, timezone
from typing import Iterable, Tuple

from .types import PricePoint, PriceSeries


def instant(ts: datetime) -> datetime:
    """
    UTC view of an aware timestamp; naive ones are returned unchanged.

    Aware datetimes sharing a tzinfo compare by wall clock and ignore ``fold``,
    which mixes up the repeated hour of a DST fall-back day.
    """
    return ts.astimezone(timezone.utc) if ts.tzinfo is not None else ts


def price_key(point: PricePoint, *, descending: bool = False) -> Tuple[float, datetime]:
    """
    Two-key ordering used by both sorting and min/max lookups.

    Primary key is the price (negated when ``descending``), secondary key is
    ``time_start`` ascending, so equal prices always resolve to the earliest hour.
    """
    price = -point.price_per_kwh if descending else point.price_per_kwh
    return (price, instant(point.time_start))


def ascending_by_price(series: Iterable[PricePoint]) -> PriceSeries:
    """Cheapest first; equal prices keep chronological order."""
    return tuple(sorted(series, key=price_key))


def ascending_by_time(series: Iterable[PricePoint]) -> PriceSeries:
    return tuple(sorted(series, key=lambda p: instant(p.time_start)))
