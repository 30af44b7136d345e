from __future__ import annotations
from datetime import date, timedelta
from typing import Sequence

from loguru import logger

from .types import Continuation, PricePoint, PriceSeries


def is_continuation_of(series: Sequence[PricePoint], day: date) -> Continuation:
    """
    Classify ``series`` against the requested ``day`` by its first point.

    The first point's calendar date is read in its own timezone; no zone
    conversion happens here.
    """
    if not series:
        return Continuation.UNRELATED
    first = series[0].time_start.date()
    if first == day + timedelta(days=1):
        return Continuation.CONTINUES
    if first == day:
        return Continuation.SAME_DAY
    return Continuation.UNRELATED


def assemble(
    today: Sequence[PricePoint],
    tomorrow: Sequence[PricePoint],
    requested_date: date,
) -> PriceSeries:
    """
    Join today's series with tomorrow's when tomorrow really is the next day.

    Order is preserved as given (today, then tomorrow). A tomorrow series that
    is empty or does not continue ``requested_date`` is dropped without error.
    """
    status = is_continuation_of(tomorrow, requested_date)
    if status is Continuation.CONTINUES:
        return tuple(today) + tuple(tomorrow)

    if status is Continuation.SAME_DAY:
        logger.debug(
            "Dropping next-day series: provider returned {} again", requested_date
        )
    elif tomorrow:
        logger.debug(
            "Dropping next-day series starting {}: not the day after {}",
            tomorrow[0].time_start.date(),
            requested_date,
        )
    return tuple(today)
