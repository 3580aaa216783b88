# tests/test_rates.py
import pytest

from app.connectors.base import SeriesObservation
from app.service_layer.rates import (
    SERIES_FED_FUNDS,
    SERIES_MORTGAGE_15YR,
    SERIES_MORTGAGE_30YR,
    SERIES_TREASURY_10YR,
    SERIES_UNEMPLOYMENT,
    LiveRates,
    fetch_live_rates,
)

from conftest import FakeSeriesSource

DEFAULTS = LiveRates()


def _obs(date, value):
    return SeriesObservation(date=date, value=value)


@pytest.fixture
def full_source():
    return FakeSeriesSource(
        {
            SERIES_MORTGAGE_30YR: [_obs("2026-10-15", 6.3), _obs("2026-10-08", 6.42)],
            SERIES_MORTGAGE_15YR: [_obs("2026-10-15", 5.49)],
            SERIES_FED_FUNDS: [_obs("2026-09-01", 4.22)],
            SERIES_UNEMPLOYMENT: [_obs("2026-09-01", 4.3)],
            SERIES_TREASURY_10YR: [_obs("2026-10-16", 4.02)],
        }
    )


@pytest.mark.asyncio
@pytest.mark.parametrize("key", [None, "", "DEMO_API_KEY"])
async def test_no_usable_key_serves_fallback_without_calling_upstream(full_source, key):
    rates = await fetch_live_rates(full_source, key)

    assert rates.source == "Fallback Data"
    assert rates.mortgage_30yr == 6.72
    assert rates.mortgage_15yr == 5.92
    assert rates.mortgage_30yr_change == 0.12
    assert rates.fed_funds == 4.33
    assert rates.cpi_yoy == 2.9
    assert rates.unemployment == 4.1
    assert rates.housing_starts == 1.499
    assert rates.treasury_10yr == 4.68
    assert rates.updated
    assert full_source.requests == []


@pytest.mark.asyncio
async def test_no_source_serves_fallback():
    rates = await fetch_live_rates(None, "real-key")
    assert rates.source == "Fallback Data"


@pytest.mark.asyncio
async def test_live_rates_from_every_series(full_source):
    rates = await fetch_live_rates(full_source, "real-key")

    assert rates.source == "FRED API (Live)"
    assert rates.mortgage_30yr == 6.3
    assert rates.mortgage_30yr_change == -0.12
    assert rates.updated == "2026-10-15"
    assert rates.mortgage_15yr == 5.49
    assert rates.fed_funds == 4.22
    assert rates.unemployment == 4.3
    assert rates.treasury_10yr == 4.02
    # never fetched live
    assert rates.cpi_yoy == DEFAULTS.cpi_yoy
    assert rates.housing_starts == DEFAULTS.housing_starts
    assert full_source.requests[0] == (SERIES_MORTGAGE_30YR, 2)


@pytest.mark.asyncio
async def test_failed_series_keep_their_defaults():
    source = FakeSeriesSource({SERIES_FED_FUNDS: [_obs("2026-09-01", 4.08)]})
    rates = await fetch_live_rates(source, "real-key")

    assert rates.source == "FRED API (Live)"
    assert rates.fed_funds == 4.08
    assert rates.mortgage_30yr == DEFAULTS.mortgage_30yr
    assert rates.mortgage_30yr_change == DEFAULTS.mortgage_30yr_change
    assert rates.mortgage_15yr == DEFAULTS.mortgage_15yr
    assert rates.treasury_10yr == DEFAULTS.treasury_10yr
    assert rates.updated != "2026-09-01"


@pytest.mark.asyncio
async def test_single_observation_keeps_default_change():
    source = FakeSeriesSource({SERIES_MORTGAGE_30YR: [_obs("2026-10-15", 6.5)]})
    rates = await fetch_live_rates(source, "real-key")

    assert rates.mortgage_30yr == 6.5
    assert rates.mortgage_30yr_change == DEFAULTS.mortgage_30yr_change
    assert rates.updated == "2026-10-15"
