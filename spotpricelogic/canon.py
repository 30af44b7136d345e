from __future__ import annotations
from typing import Final, Dict

DEFAULT_TZ: Final[str] = "Europe/Stockholm"
ZONES: Final[tuple[str, ...]] = ("SE1", "SE2", "SE3", "SE4")

# Charging windows offered to the user, in hours
CHARGING_WINDOW_HOURS: Final[tuple[int, ...]] = (2, 4, 8)

# Two window sums closer than this are treated as equal
TIE_TOLERANCE: Final[float] = 1e-9

# A single local day has 23 (spring forward), 24 or 25 (fall back) hours
DAY_LENGTHS: Final[tuple[int, ...]] = (23, 24, 25)

INDEX_NAME: Final[str] = "time_start"
PRICE_COL: Final[str] = "price_per_kwh"

# Raw provider field -> canonical column
RAW_COLUMN_MAP: Dict[str, str] = {
    "time_start": INDEX_NAME,
    "SEK_per_kWh": PRICE_COL,
}

PROVIDER_BASE_URL: Final[str] = "https://www.elprisetjustnu.se/api/v1/prices"
