from __future__ import annotations
from typing import Any, Iterable, Mapping
from zoneinfo import ZoneInfo

import pandas as pd
from pydantic import ValidationError

from . import canon, exceptions
from .ordering import instant
from .schema import RawPriceRecord
from .types import PricePoint, PriceSeries


def from_records(records: Iterable[Mapping[str, Any]]) -> PriceSeries:
    """
    Parse provider JSON records into a PriceSeries, keeping the given order.

    Each record needs 'SEK_per_kWh' and an offset-aware ISO 'time_start'.
    """
    out = []
    for i, rec in enumerate(records):
        try:
            raw = RawPriceRecord.model_validate(rec)
        except ValidationError as e:
            raise exceptions.IngestError(f"Invalid price record at position {i}: {e}") from e
        out.append(PricePoint(time_start=raw.time_start, price_per_kwh=raw.sek_per_kwh))
    return tuple(out)


def _auto_rename(df: pd.DataFrame) -> pd.DataFrame:
    new = df.copy()

    # 1) Timestamp: a DatetimeIndex, or a known column moved into the index
    if isinstance(new.index, pd.DatetimeIndex) or new.index.name == canon.INDEX_NAME:
        new.index.name = canon.INDEX_NAME
    else:
        tcol = next((c for c in (canon.INDEX_NAME, "time", "timestamp") if c in new.columns), None)
        if tcol is None:
            raise exceptions.IngestError(
                "No timestamp column found and index is not datetime. "
                f"Expected one of: {canon.INDEX_NAME}, time, timestamp."
            )
        new = new.rename(columns={tcol: canon.INDEX_NAME}).set_index(canon.INDEX_NAME)

    # 2) Price column under its canonical name
    if canon.PRICE_COL not in new.columns:
        new = new.rename(columns=canon.RAW_COLUMN_MAP)
    if canon.PRICE_COL not in new.columns:
        raise exceptions.IngestError(f"Missing required column: {canon.PRICE_COL}")
    return new


def from_dataframe(df: pd.DataFrame, *, tz: str = canon.DEFAULT_TZ) -> PriceSeries:
    """
    Convert a frame of prices into a PriceSeries, in row order.

    Naive timestamps are localised to ``tz``; aware ones are kept as they are.
    An object index (as written by ``to_frame``) may mix UTC offsets.
    """
    df = _auto_rename(df)
    if isinstance(df.index, pd.DatetimeIndex):
        idx = df.index
        if idx.tz is None:
            idx = idx.tz_localize(ZoneInfo(tz), ambiguous="infer", nonexistent="raise")
        stamps = list(idx)
    else:
        # per-element, so differing offsets are never coerced to one
        stamps = [pd.Timestamp(v) for v in df.index]
        stamps = [ts.tz_localize(ZoneInfo(tz)) if ts.tz is None else ts for ts in stamps]

    prices = df[canon.PRICE_COL].astype(float).to_numpy()
    return tuple(
        PricePoint(time_start=ts.to_pydatetime(), price_per_kwh=float(price))
        for ts, price in zip(stamps, prices)
    )


def to_frame(series: Iterable[PricePoint]) -> pd.DataFrame:
    """Series as a frame: index 'time_start' (object dtype keeps each offset), column 'price_per_kwh'."""
    points = list(series)
    return pd.DataFrame(
        {canon.PRICE_COL: [p.price_per_kwh for p in points]},
        index=pd.Index([p.time_start for p in points], dtype=object, name=canon.INDEX_NAME),
    )


def resample_hourly(series: Iterable[PricePoint]) -> PriceSeries:
    """
    Average sub-hourly prices (e.g. quarter-hours) into hourly points.

    Buckets are built on the UTC instant so DST repeats stay separate; each
    output point keeps the offset of its first input. Output is time ordered.
    """
    points = list(series)
    if not points:
        return ()

    df = pd.DataFrame(
        {
            "utc": pd.to_datetime([instant(p.time_start) for p in points], utc=True),
            "price": [p.price_per_kwh for p in points],
            "pos": range(len(points)),
        }
    )
    df["bucket"] = df["utc"].dt.floor("h")
    hourly = df.groupby("bucket", sort=True).agg(
        price=("price", "mean"), pos=("pos", "first")
    )
    return tuple(
        PricePoint(
            time_start=points[int(pos)].time_start.replace(minute=0, second=0, microsecond=0),
            price_per_kwh=float(price),
        )
        for price, pos in zip(hourly["price"], hourly["pos"])
    )


def is_sub_hourly(series: Iterable[PricePoint]) -> bool:
    return any(p.time_start.minute or p.time_start.second for p in series)
