from __future__ import annotations
from typing import Optional, Sequence

from .ordering import price_key
from .types import PricePoint, PriceSummary


def min_of(series: Sequence[PricePoint]) -> Optional[PricePoint]:
    """Cheapest point, earliest on ties. None when the series is empty."""
    if not series:
        return None
    return min(series, key=price_key)


def max_of(series: Sequence[PricePoint]) -> Optional[PricePoint]:
    """Most expensive point, earliest on ties. None when the series is empty."""
    if not series:
        return None
    return min(series, key=lambda p: price_key(p, descending=True))


def mean_of(series: Sequence[PricePoint]) -> float:
    """
    Unweighted arithmetic mean of the prices; 0.0 for an empty series.

    Every point counts as one hour, also on 23- and 25-hour DST days.
    """
    if not series:
        return 0.0
    return sum(p.price_per_kwh for p in series) / len(series)


def summarise(series: Sequence[PricePoint]) -> Optional[PriceSummary]:
    lo = min_of(series)
    hi = max_of(series)
    if lo is None or hi is None:
        return None
    return {
        "min": lo,
        "max": hi,
        "mean": mean_of(series),
        "count": len(series),
    }
