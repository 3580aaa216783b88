# app/service_layer/rates.py
from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from ..connectors.base import EconomicSeriesSource, SeriesObservation, SourceUnavailable
from ..domain.numbers import round_half_away
from .cache import utc_now_iso

log = logging.getLogger(__name__)

# FRED series ids
SERIES_MORTGAGE_30YR = "MORTGAGE30US"
SERIES_MORTGAGE_15YR = "MORTGAGE15US"
SERIES_FED_FUNDS = "FEDFUNDS"
SERIES_UNEMPLOYMENT = "UNRATE"
SERIES_TREASURY_10YR = "DGS10"

SOURCE_FALLBACK = "Fallback Data"
SOURCE_LIVE = "FRED API (Live)"

# Placeholder the upstream docs hand out; never a real credential
DEMO_API_KEY = "DEMO_API_KEY"

# series id -> LiveRates field, fetched after the 30-year history
_LATEST_VALUE_FIELDS: dict[str, str] = {
    SERIES_MORTGAGE_15YR: "mortgage_15yr",
    SERIES_FED_FUNDS: "fed_funds",
    SERIES_UNEMPLOYMENT: "unemployment",
    SERIES_TREASURY_10YR: "treasury_10yr",
}


@dataclass(frozen=True)
class LiveRates:
    mortgage_30yr: float = 6.72
    mortgage_15yr: float = 5.92
    mortgage_30yr_change: float = 0.12
    fed_funds: float = 4.33
    cpi_yoy: float = 2.9
    unemployment: float = 4.1
    housing_starts: float = 1.499
    treasury_10yr: float = 4.68
    updated: str = ""
    source: str = SOURCE_FALLBACK


async def _observations(
    source: EconomicSeriesSource,
    series_id: str,
    *,
    api_key: str,
    limit: int,
) -> list[SeriesObservation]:
    try:
        return await source.fetch_observations(series_id, api_key=api_key, limit=limit)
    except SourceUnavailable as e:
        log.warning("rates: %s unavailable: %s", series_id, e)
    except Exception:
        log.exception("rates: %s fetch failed", series_id)
    return []


async def fetch_live_rates(source: EconomicSeriesSource | None, api_key: str | None) -> LiveRates:
    """
    Current rates. Without a usable key (or a source) every field is the
    fallback default. With one, each series that fails keeps its default
    while the rest go live.
    """
    rates = LiveRates(updated=utc_now_iso())
    if source is None or not api_key or api_key == DEMO_API_KEY:
        return rates

    rates = replace(rates, source=SOURCE_LIVE)

    history = await _observations(source, SERIES_MORTGAGE_30YR, api_key=api_key, limit=2)
    if history:
        current = history[0]
        rates = replace(rates, mortgage_30yr=current.value, updated=current.date)
        if len(history) > 1:
            change = round_half_away(current.value - history[1].value, 2)
            rates = replace(rates, mortgage_30yr_change=change)

    for series_id, field in _LATEST_VALUE_FIELDS.items():
        latest = await _observations(source, series_id, api_key=api_key, limit=1)
        if latest:
            rates = replace(rates, **{field: latest[0].value})

    return rates
