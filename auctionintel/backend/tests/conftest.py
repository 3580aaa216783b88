# tests/conftest.py
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.connectors.base import CensusCountyRow, HomeValueRow, SeriesObservation, SourceUnavailable
from app.entrypoints.fastapi_app import create_app
from app.service_layer.cache import TtlCache


class FakeClock:
    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def __call__(self) -> float:
        return self.now


class FakeCensusSource:
    def __init__(self, rows: list[CensusCountyRow] | None = None, error: Exception | None = None) -> None:
        self.rows = rows or []
        self.error = error
        self.calls = 0
        self.api_keys: list[str | None] = []

    async def fetch_counties(self, *, api_key: str | None = None) -> list[CensusCountyRow]:
        self.calls += 1
        self.api_keys.append(api_key)
        if self.error is not None:
            raise self.error
        return list(self.rows)


class FakeSeriesSource:
    """Serves canned observations per series id; unknown ids are unavailable."""

    def __init__(self, series: dict[str, list[SeriesObservation]] | None = None) -> None:
        self.series = series or {}
        self.requests: list[tuple[str, int]] = []

    async def fetch_observations(self, series_id: str, *, api_key: str, limit: int = 1) -> list[SeriesObservation]:
        self.requests.append((series_id, limit))
        if series_id not in self.series:
            raise SourceUnavailable(f"no data for series {series_id}")
        return self.series[series_id][:limit]


class FakeHomeValueSource:
    def __init__(self, rows: list[HomeValueRow] | None = None, error: Exception | None = None) -> None:
        self.rows = rows or []
        self.error = error

    async def fetch_regions(self) -> list[HomeValueRow]:
        if self.error is not None:
            raise self.error
        return list(self.rows)


def census_row(name, state_fips, county_fips, pop, income, home_value, units="0", vacant="0"):
    return CensusCountyRow(
        name=name,
        state_fips=state_fips,
        county_fips=county_fips,
        population=pop,
        median_income=income,
        median_home_value=home_value,
        housing_units=units,
        vacant_units=vacant,
    )


CENSUS_ROWS = [
    census_row("Wayne County, Michigan", "26", "163", "1793561", "57223", "158700", "815000", "98000"),
    census_row("Orleans Parish, Louisiana", "22", "071", "383997", "51116", "264600", "193000", "38000"),
    census_row("Kenai Peninsula Borough, Alaska", "02", "122", "58957", "77492", "309600", "31000", "10500"),
    census_row("Fairfax County, Virginia", "51", "059", "1150309", "145165", "683700", "420000", "12000"),
    # unusable rows
    census_row("San Juan Municipio, Puerto Rico", "72", "127", "342259", "23000", "120000"),
    census_row("Empty County, Texas", "48", "999", "0", "50000", "100000"),
    census_row("Sentinel County, Texas", "48", "998", "12000", "-666666666", "90000"),
    census_row("Broken County, Ohio", "39", "997", "N/A", "50000", "100000"),
]


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def census_cache(clock) -> TtlCache:
    return TtlCache(86400, clock=clock)


@pytest.fixture
def census_source() -> FakeCensusSource:
    return FakeCensusSource(rows=CENSUS_ROWS)


@pytest.fixture
def client(census_source) -> TestClient:
    app = create_app(census_source=census_source)
    return TestClient(app)


@pytest.fixture
def bare_client() -> TestClient:
    """No upstream sources configured."""
    return TestClient(create_app())
