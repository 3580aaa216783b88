# app/service_layer/home_values.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..connectors.base import HomeValueIndexSource, HomeValueRow, SourceUnavailable
from ..domain.numbers import round_half_away
from .cache import utc_now_iso

log = logging.getLogger(__name__)

ZHVI_SOURCE_LABEL = "Zillow Research ZHVI"
ZHVI_FETCH_ERROR = "Zillow Research - FETCH ERROR"


@dataclass(frozen=True)
class ZhviRecord:
    region_name: str
    state: str
    state_fips: str
    county_fips: str
    zhvi: float
    zhvi_change_yoy: float


@dataclass(frozen=True)
class ZhviSnapshot:
    updated: str
    source: str
    data: list[ZhviRecord] = field(default_factory=list)


def yoy_change_pct(current: float, year_ago: float) -> float:
    """Percent change to one decimal; 0 when there is no usable year-ago value."""
    if year_ago <= 0:
        return 0.0
    return round_half_away((current - year_ago) / year_ago * 100.0 * 10.0) / 10.0


def to_record(row: HomeValueRow) -> ZhviRecord | None:
    current = row.current or 0.0
    year_ago = row.year_ago or 0.0
    if current <= 0 or not row.state:
        return None
    return ZhviRecord(
        region_name=row.region_name,
        state=row.state,
        state_fips=row.state_fips,
        county_fips=row.county_fips,
        zhvi=current,
        zhvi_change_yoy=yoy_change_pct(current, year_ago),
    )


async def fetch_zhvi(source: HomeValueIndexSource | None) -> ZhviSnapshot:
    if source is None:
        log.warning("zhvi: no source configured")
        return ZhviSnapshot(updated=utc_now_iso(), source=ZHVI_FETCH_ERROR)

    try:
        rows = await source.fetch_regions()
    except SourceUnavailable as e:
        log.warning("zhvi: source unavailable: %s", e)
        return ZhviSnapshot(updated=utc_now_iso(), source=ZHVI_FETCH_ERROR)
    except Exception:
        log.exception("zhvi: fetch failed")
        return ZhviSnapshot(updated=utc_now_iso(), source=ZHVI_FETCH_ERROR)

    records = [rec for rec in (to_record(r) for r in rows) if rec is not None]
    log.info("zhvi: %d regions kept of %d", len(records), len(rows))
    return ZhviSnapshot(updated=utc_now_iso(), source=ZHVI_SOURCE_LABEL, data=records)
