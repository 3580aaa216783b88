# app/service_layer/census.py
from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Any

from ..connectors.base import CensusCountyRow, CensusSource, SourceUnavailable
from ..domain.numbers import to_int
from ..domain.scoring import demographic_tier
from ..reference.states import FIPS_TO_STATE
from .cache import TtlCache, utc_now_iso

log = logging.getLogger(__name__)

ALL_COUNTIES_KEY = "all"
CENSUS_SOURCE_LABEL = "US Census Bureau ACS 2022"

# Louisiana parishes, Alaska boroughs
_NAME_SUFFIXES = (" County", " Parish", " Borough")


@dataclass(frozen=True)
class CountyCensusData:
    name: str
    state: str
    fips: str
    population: int
    median_income: int
    median_home_value: int
    total_housing_units: int
    vacant_units: int
    tier: int


def clean_county_name(raw: str) -> str:
    name = raw.split(",")[0] if raw else "Unknown"
    for suffix in _NAME_SUFFIXES:
        name = name.replace(suffix, "")
    return name.strip()


def normalize_row(row: CensusCountyRow) -> CountyCensusData | None:
    """
    One bureau row -> county record, or None when the row is unusable
    (unknown state FIPS, zero population, negative income sentinel).
    """
    state = FIPS_TO_STATE.get(row.state_fips)
    if state is None:
        return None

    population = to_int(row.population)
    income = to_int(row.median_income)
    home_value = to_int(row.median_home_value)

    if population == 0 or income < 0:
        return None

    return CountyCensusData(
        name=clean_county_name(row.name),
        state=state,
        fips=f"{row.state_fips}{row.county_fips}",
        population=population,
        median_income=income,
        median_home_value=home_value,
        total_housing_units=to_int(row.housing_units),
        vacant_units=to_int(row.vacant_units),
        tier=demographic_tier(population, income, home_value),
    )


async def fetch_all_counties(
    source: CensusSource,
    cache: TtlCache[list[CountyCensusData]],
    *,
    api_key: str | None = None,
) -> list[CountyCensusData]:
    """Every county with a demographic tier. Served from cache while fresh (24h by default)."""

    async def _load() -> list[CountyCensusData]:
        rows = await source.fetch_counties(api_key=api_key)
        out: list[CountyCensusData] = []
        skipped = 0
        for row in rows:
            rec = normalize_row(row)
            if rec is None:
                skipped += 1
                continue
            out.append(rec)
        log.info("census: loaded %d counties (%d rows skipped)", len(out), skipped)
        return out

    return await cache.get_or_fetch(ALL_COUNTIES_KEY, _load)


async def fetch_state_counties(
    state: str,
    source: CensusSource,
    cache: TtlCache[list[CountyCensusData]],
    *,
    api_key: str | None = None,
) -> list[CountyCensusData]:
    st = state.upper()
    counties = await fetch_all_counties(source, cache, api_key=api_key)
    return [c for c in counties if c.state == st]


def county_stats(counties: list[CountyCensusData]) -> dict[str, Any]:
    return {
        "total_counties": len(counties),
        "by_tier": dict(Counter(c.tier for c in counties)),
        "by_state": dict(Counter(c.state for c in counties)),
    }


@dataclass(frozen=True)
class CensusSnapshot:
    updated: str
    source: str
    counties: list[CountyCensusData] = field(default_factory=list)


async def census_snapshot(
    source: CensusSource | None,
    cache: TtlCache[list[CountyCensusData]],
    *,
    state: str | None = None,
    api_key: str | None = None,
) -> CensusSnapshot:
    """
    Wraps the fetch for the HTTP layer: upstream failures become an
    error-marked snapshot with no counties instead of an exception.
    """
    if source is None:
        log.warning("census: no source configured")
        return CensusSnapshot(updated="error", source="Census API Error: no census source configured")

    try:
        if state is None:
            counties = await fetch_all_counties(source, cache, api_key=api_key)
        else:
            counties = await fetch_state_counties(state, source, cache, api_key=api_key)
    except SourceUnavailable as e:
        log.warning("census: source unavailable state=%s: %s", state, e)
        return CensusSnapshot(updated="error", source=f"Census API Error: {e}")
    except Exception as e:
        log.exception("census: fetch failed state=%s", state)
        return CensusSnapshot(updated="error", source=f"Census API Error: {e}")

    label = CENSUS_SOURCE_LABEL if state is None else f"{CENSUS_SOURCE_LABEL} - {state.upper()}"
    return CensusSnapshot(updated=utc_now_iso(), source=label, counties=counties)
