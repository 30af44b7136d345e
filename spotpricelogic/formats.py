from __future__ import annotations
from datetime import datetime
from decimal import ROUND_HALF_EVEN, Decimal
from typing import Optional

from .config import LocaleConfig
from .types import ChargingWindowResult, PricePoint

_DEFAULT_LOCALE = LocaleConfig()


def _scaled(value: float, locale: LocaleConfig) -> Decimal:
    # exact binary expansion of the double, rounded later like DecimalFormat
    return Decimal(value * locale.scale)


def _localise(text: str, locale: LocaleConfig) -> str:
    return text.replace(".", locale.decimal_sep)


def format_ore_fixed(value: float, locale: Optional[LocaleConfig] = None) -> str:
    """Price in SEK/kWh as öre with exactly two decimals, e.g. 0.1234 -> '12,34'."""
    locale = locale or _DEFAULT_LOCALE
    q = _scaled(value, locale).quantize(Decimal("0.01"), rounding=ROUND_HALF_EVEN)
    return _localise(f"{q:.2f}", locale)


def format_ore_adaptive(value: float, locale: Optional[LocaleConfig] = None) -> str:
    """Like format_ore_fixed but trailing zeros are dropped: 0.125 -> '12,5', 0.3 -> '30'."""
    locale = locale or _DEFAULT_LOCALE
    q = _scaled(value, locale).quantize(Decimal("0.01"), rounding=ROUND_HALF_EVEN)
    text = f"{q:.2f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return _localise(text, locale)


def hour_span(start: datetime) -> str:
    """'HH-HH' for the hour starting at ``start``; 23 wraps to '23-00'."""
    h1 = start.hour
    return f"{h1:02d}-{(h1 + 1) % 24:02d}"


def start_label(start: datetime) -> str:
    return f"{start.hour:02d}:00"


def price_line(point: PricePoint, locale: Optional[LocaleConfig] = None) -> str:
    locale = locale or _DEFAULT_LOCALE
    return f"{hour_span(point.time_start)} {format_ore_fixed(point.price_per_kwh, locale)} {locale.unit_label}"


def charging_lines(
    result: ChargingWindowResult, locale: Optional[LocaleConfig] = None
) -> list[str]:
    locale = locale or _DEFAULT_LOCALE
    return [
        f"Påbörja laddning kl {start_label(result.start)}",
        f"Medelpris för fönster: {format_ore_adaptive(result.mean_price_per_kwh, locale)} {locale.unit_label}",
    ]
