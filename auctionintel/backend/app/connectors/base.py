# app/connectors/base.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol


class SourceUnavailable(Exception):
    """Upstream could not be reached or returned nothing usable."""


@dataclass(frozen=True)
class CensusCountyRow:
    # Raw ACS 5-year cells; numeric cells may arrive as strings
    name: str  # e.g. "Wayne County, Michigan"
    state_fips: str
    county_fips: str
    population: Any
    median_income: Any
    median_home_value: Any
    housing_units: Any
    vacant_units: Any


@dataclass(frozen=True)
class SeriesObservation:
    date: str
    value: float


@dataclass(frozen=True)
class HomeValueRow:
    region_name: str
    state: str
    state_fips: str
    county_fips: str
    current: float | None
    year_ago: float | None


class CensusSource(Protocol):
    async def fetch_counties(self, *, api_key: str | None = None) -> list[CensusCountyRow]:
        """Every county row the bureau publishes (no header row)."""
        ...


class EconomicSeriesSource(Protocol):
    async def fetch_observations(
        self,
        series_id: str,
        *,
        api_key: str,
        limit: int = 1,
    ) -> list[SeriesObservation]:
        """Newest observation first. Unparseable values are already dropped."""
        ...


class HomeValueIndexSource(Protocol):
    async def fetch_regions(self) -> list[HomeValueRow]:
        """One row per county region with the latest and year-ago index values."""
        ...
