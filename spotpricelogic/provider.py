from __future__ import annotations
from datetime import date
from typing import Optional, Protocol

import requests
from loguru import logger

from . import exceptions, ingest
from .config import ProviderConfig
from .types import PriceSeries, Zone


class PriceProvider(Protocol):
    def fetch_prices(self, day: date, zone: Zone) -> PriceSeries: ...


class ElprisetJustNuProvider:
    """
    Day-ahead prices from elprisetjustnu.se, one request per (day, zone).

    A 404 means the day is not published (yet) and yields an empty series.
    Any other failure raises ProviderError; there is no retry.
    """

    def __init__(
        self,
        config: Optional[ProviderConfig] = None,
        session: Optional[requests.Session] = None,
    ):
        self.config = config or ProviderConfig()
        self._http = session or requests

    def url_for(self, day: date, zone: Zone) -> str:
        zone = Zone(zone)
        return f"{self.config.base_url.rstrip('/')}/{day:%Y}/{day:%m-%d}_{zone.value}.json"

    def fetch_prices(self, day: date, zone: Zone) -> PriceSeries:
        zone = Zone(zone)
        url = self.url_for(day, zone)
        logger.debug("GET {}", url)
        try:
            response = self._http.get(url, timeout=self.config.timeout_s)
        except requests.RequestException as e:
            raise exceptions.ProviderError(f"Request failed for {url}: {e}") from e

        if response.status_code == 404:
            logger.info("No prices published for {} {}", zone.value, day)
            return ()
        try:
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            raise exceptions.ProviderError(f"Bad response from {url}: {e}") from e

        if not data:
            return ()
        if not isinstance(data, list):
            raise exceptions.ProviderError(f"Expected a JSON list from {url}")

        try:
            series = ingest.from_records(data)
        except exceptions.IngestError as e:
            raise exceptions.ProviderError(str(e)) from e

        if self.config.resample_hourly and ingest.is_sub_hourly(series):
            series = ingest.resample_hourly(series)
        logger.info("Fetched {} price point(s) for {} {}", len(series), zone.value, day)
        return series
