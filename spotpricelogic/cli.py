"""Command-line entry point: spot prices for a Swedish zone.

Modes:
- default: lowest, highest and mean price of the day
- --sorted: every hour, cheapest first
- --charging 2h|4h|8h: cheapest consecutive window across today and tomorrow
"""

from __future__ import annotations

import sys
from datetime import date, datetime, timedelta
from typing import List, Optional
from zoneinfo import ZoneInfo

import typer
from loguru import logger

from . import aggregate, assemble, exceptions, formats, ordering, validate, window
from .config import Config, default_config
from .provider import ElprisetJustNuProvider, PriceProvider
from .types import Zone

NO_DATA = "Ingen data / inga priser."

app = typer.Typer(help="Spot electricity prices for SE1-SE4.", add_completion=False)


def get_provider(config: Config) -> PriceProvider:
    return ElprisetJustNuProvider(config.provider)


def _log_issues(series, label: str) -> None:
    for issue in validate.series_issues(series):
        logger.warning("{}: {}", label, issue)


def summary_lines(provider: PriceProvider, day: date, zone: Zone, config: Config) -> List[str]:
    today = provider.fetch_prices(day, zone)
    _log_issues(today, f"{zone.value} {day}")
    summary = aggregate.summarise(today)
    if summary is None:
        return [NO_DATA]
    loc = config.locale
    lo, hi = summary["min"], summary["max"]
    return [
        f"Lägsta pris: {formats.price_line(lo, loc)}",
        f"Högsta pris: {formats.price_line(hi, loc)}",
        f"Medelpris: {formats.format_ore_adaptive(summary['mean'], loc)} {loc.unit_label}",
    ]


def sorted_lines(provider: PriceProvider, day: date, zone: Zone, config: Config) -> List[str]:
    today = provider.fetch_prices(day, zone)
    _log_issues(today, f"{zone.value} {day}")
    if not today:
        return ["[]"]
    return [formats.price_line(p, config.locale) for p in ordering.ascending_by_price(today)]


def charging_lines(
    provider: PriceProvider, day: date, zone: Zone, hours: int, config: Config
) -> List[str]:
    today = provider.fetch_prices(day, zone)
    tomorrow = provider.fetch_prices(day + timedelta(days=1), zone)
    series = assemble.assemble(today, tomorrow, day)
    _log_issues(series, f"{zone.value} {day}+1")
    result = window.find_cheapest_window(
        series, hours, tolerance=config.analysis.tie_tolerance
    )
    if result is None:
        return [NO_DATA]
    return formats.charging_lines(result, config.locale)


def _parse_date(value: Optional[str], tz: str) -> date:
    if value is None:
        return datetime.now(ZoneInfo(tz)).date()
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise typer.BadParameter(
            f"Invalid date: {value} (ogiltigt datum, format yyyy-MM-dd)", param_hint="--date"
        ) from None


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


@app.command()
def main(
    zone: Zone = typer.Option(..., "--zone", case_sensitive=False, help="Price zone."),
    day: Optional[str] = typer.Option(None, "--date", help="Date as YYYY-MM-DD (default: today)."),
    sorted_: bool = typer.Option(False, "--sorted", help="List every hour, cheapest first."),
    charging: Optional[str] = typer.Option(
        None, "--charging", help="Find the cheapest 2h, 4h or 8h window."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr."),
):
    """Show spot prices for a zone and day."""
    _configure_logging(verbose)
    config = default_config()
    requested = _parse_date(day, config.analysis.timezone)

    hours = None
    if charging is not None and charging.strip():
        try:
            hours = validate.parse_window_hours(charging, config.analysis.allowed_window_hours)
        except exceptions.WindowError as e:
            raise typer.BadParameter(str(e), param_hint="--charging") from None

    provider = get_provider(config)
    logger.info("Zone {} on {}", zone.value, requested)
    try:
        if hours is not None:
            lines = charging_lines(provider, requested, zone, hours, config)
        elif sorted_:
            lines = sorted_lines(provider, requested, zone, config)
        else:
            lines = summary_lines(provider, requested, zone, config)
    except exceptions.ProviderError as e:
        typer.echo(f"Kunde inte hämta priser: {e}", err=True)
        raise typer.Exit(code=1)

    for line in lines:
        typer.echo(line)


if __name__ == "__main__":
    app()
