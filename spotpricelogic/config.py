from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from . import canon, exceptions


@dataclass
class AnalysisConfig:
    timezone: str = canon.DEFAULT_TZ
    tie_tolerance: float = canon.TIE_TOLERANCE
    allowed_window_hours: Tuple[int, ...] = canon.CHARGING_WINDOW_HOURS

    def __post_init__(self) -> None:
        exceptions.require(
            self.tie_tolerance >= 0.0,
            f"tie_tolerance must be non-negative, got {self.tie_tolerance}",
            exceptions.ConfigError,
        )
        exceptions.require(
            bool(self.allowed_window_hours)
            and all(h >= 1 for h in self.allowed_window_hours),
            f"allowed_window_hours must be positive, got {self.allowed_window_hours}",
            exceptions.ConfigError,
        )


@dataclass
class ProviderConfig:
    base_url: str = canon.PROVIDER_BASE_URL
    timeout_s: float = 10.0
    # The API serves quarter-hour prices for newer dates; average them per hour
    resample_hourly: bool = True


@dataclass
class LocaleConfig:
    decimal_sep: str = ","  # sv_SE
    unit_label: str = "öre"
    scale: float = 100.0  # SEK/kWh -> öre/kWh


@dataclass
class Config:
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    provider: ProviderConfig = field(default_factory=ProviderConfig)
    locale: LocaleConfig = field(default_factory=LocaleConfig)


def default_config() -> Config:
    return Config()
