from __future__ import annotations
from datetime import timedelta
from typing import Iterable, List, Sequence

from . import canon, exceptions
from .ordering import ascending_by_time, instant
from .types import PricePoint


def series_issues(series: Sequence[PricePoint]) -> List[str]:
    """
    Opportunistic shape checks for a provider series.

    Returns human-readable findings; an empty list means nothing looked off.
    Nothing is rejected here, callers decide whether to log or ignore.
    """
    if not series:
        return []

    issues: List[str] = []
    naive = [p for p in series if p.time_start.tzinfo is None]
    if naive:
        issues.append(f"{len(naive)} point(s) have a naive time_start")
        # aware/naive datetimes cannot be compared, skip the ordering checks
        return issues

    starts = [instant(p.time_start) for p in series]
    if len(set(starts)) != len(starts):
        issues.append("duplicate time_start values")

    ordered = ascending_by_time(series)
    steps = [
        instant(b.time_start) - instant(a.time_start)
        for a, b in zip(ordered, ordered[1:])
    ]
    gaps = [s for s in steps if s != timedelta(hours=1)]
    if gaps:
        issues.append(f"{len(gaps)} step(s) not exactly one hour apart")

    dates = {p.time_start.date() for p in series}
    if len(dates) == 1 and len(series) not in canon.DAY_LENGTHS:
        issues.append(
            f"single-day series has {len(series)} points, "
            f"expected one of {canon.DAY_LENGTHS}"
        )
    return issues


def parse_window_hours(
    text: str, allowed: Iterable[int] = canon.CHARGING_WINDOW_HOURS
) -> int:
    """Parse '2h' / '4H' / '8' into an hour count from ``allowed``."""
    allowed = tuple(allowed)
    t = (text or "").strip().lower()
    if t.endswith("h"):
        t = t[:-1]
    try:
        hours = int(t)
    except ValueError:
        raise exceptions.WindowError(
            f"Invalid charging window {text!r}; use one of "
            + ", ".join(f"{h}h" for h in allowed)
        ) from None
    exceptions.require(
        hours in allowed,
        f"Charging window {hours}h not supported; use one of "
        + ", ".join(f"{h}h" for h in allowed),
        exceptions.WindowError,
    )
    return hours
