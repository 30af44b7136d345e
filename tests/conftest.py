from datetime import datetime
from zoneinfo import ZoneInfo

import pandas as pd
import pytest

from spotpricelogic.types import PricePoint

TZ = "Europe/Stockholm"


def make_series(prices, start=datetime(2025, 3, 10), tz=TZ):
    """Hourly PricePoints from a naive local start, one per price."""
    zi = ZoneInfo(tz)
    rng = pd.date_range(start, periods=len(prices), freq="h", tz=tz)
    # via UTC so the repeated fall-back hour gets fold=1
    return tuple(
        PricePoint(
            time_start=ts.tz_convert("UTC").to_pydatetime().astimezone(zi),
            price_per_kwh=float(p),
        )
        for ts, p in zip(rng, prices)
    )


@pytest.fixture
def series_of():
    return make_series


@pytest.fixture
def hourly_rng():
    return pd.date_range("2025-03-10", periods=24, freq="h", tz=TZ)


@pytest.fixture
def se3_v_day():
    # 0.50 down to 0.08 over the night, then back up: cheapest pair at 21-22
    prices = [0.50, 0.40, 0.30, 0.25, 0.35, 0.45, 0.60, 0.80, 0.95, 1.10, 1.05, 0.90,
              0.70, 0.55, 0.45, 0.40, 0.35, 0.30, 0.22, 0.15, 0.12, 0.08, 0.09, 0.20]
    return make_series(prices)


@pytest.fixture
def raw_records():
    return [
        {
            "SEK_per_kWh": 0.2945,
            "EUR_per_kWh": 0.0262,
            "EXR": 11.24,
            "time_start": "2025-03-10T00:00:00+01:00",
            "time_end": "2025-03-10T01:00:00+01:00",
        },
        {
            "SEK_per_kWh": 0.1512,
            "EUR_per_kWh": 0.0134,
            "EXR": 11.24,
            "time_start": "2025-03-10T01:00:00+01:00",
            "time_end": "2025-03-10T02:00:00+01:00",
        },
    ]
