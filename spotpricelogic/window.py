from __future__ import annotations
from typing import Optional, Sequence

import numpy as np
import pandas as pd
from loguru import logger

from . import canon, exceptions
from .aggregate import mean_of
from .ordering import ascending_by_time, instant
from .types import ChargingWindowResult, PricePoint


def find_cheapest_window(
    series: Sequence[PricePoint],
    window_hours: int,
    *,
    tolerance: float = canon.TIE_TOLERANCE,
) -> Optional[ChargingWindowResult]:
    """
    Find the run of ``window_hours`` consecutive points with the lowest mean price.

    The series is put in time order first. Window sums are maintained with a
    running add/subtract, so the scan is O(n) regardless of the window length.
    Sums within ``tolerance`` of each other are equal and the earlier start wins.

    - Empty series: None.
    - Fewer points than ``window_hours``: anchored at the first point, with the
      mean of everything available.
    """
    exceptions.require(
        window_hours >= 1,
        f"window_hours must be a positive integer, got {window_hours}",
        exceptions.WindowError,
    )
    points = ascending_by_time(series)
    if not points:
        return None

    if len(points) < window_hours:
        logger.debug(
            "Only {} point(s) for a {}h window; using the whole series",
            len(points),
            window_hours,
        )
        return ChargingWindowResult(
            start=points[0].time_start,
            mean_price_per_kwh=mean_of(points),
            hours=window_hours,
        )

    window_sum = sum(p.price_per_kwh for p in points[:window_hours])
    best_sum = window_sum
    best_start = 0

    for i in range(window_hours, len(points)):
        window_sum += points[i].price_per_kwh
        window_sum -= points[i - window_hours].price_per_kwh
        start = i - window_hours + 1

        if window_sum < best_sum - tolerance or (
            abs(window_sum - best_sum) < tolerance
            and instant(points[start].time_start)
            < instant(points[best_start].time_start)
        ):
            best_sum = window_sum
            best_start = start

    return ChargingWindowResult(
        start=points[best_start].time_start,
        mean_price_per_kwh=best_sum / window_hours,
        hours=window_hours,
    )


def window_means(series: Sequence[PricePoint], window_hours: int) -> pd.Series:
    """
    Mean price of every full window, indexed by window start (time ordered).

    Empty when the series is shorter than the window.
    """
    exceptions.require(
        window_hours >= 1,
        f"window_hours must be a positive integer, got {window_hours}",
        exceptions.WindowError,
    )
    points = ascending_by_time(series)
    n_windows = len(points) - window_hours + 1
    if n_windows <= 0:
        return pd.Series(
            [],
            index=pd.Index([], dtype=object, name=canon.INDEX_NAME),
            dtype=float,
            name="mean_price_per_kwh",
        )

    prices = np.array([p.price_per_kwh for p in points], dtype=float)
    csum = np.concatenate(([0.0], np.cumsum(prices)))
    means = (csum[window_hours:] - csum[:-window_hours]) / window_hours
    starts = [p.time_start for p in points[:n_windows]]
    return pd.Series(
        means,
        index=pd.Index(starts, dtype=object, name=canon.INDEX_NAME),
        name="mean_price_per_kwh",
    )
