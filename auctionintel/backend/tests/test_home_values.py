# tests/test_home_values.py
import pytest

from app.connectors.base import HomeValueRow, SourceUnavailable
from app.service_layer.home_values import fetch_zhvi, to_record, yoy_change_pct

from conftest import FakeHomeValueSource


def _row(name="Wayne County", state="MI", current=210000.0, year_ago=200000.0):
    return HomeValueRow(
        region_name=name,
        state=state,
        state_fips="26",
        county_fips="163",
        current=current,
        year_ago=year_ago,
    )


def test_yoy_change_rounds_to_one_decimal():
    assert yoy_change_pct(210000.0, 200000.0) == 5.0
    assert yoy_change_pct(100125.0, 100000.0) == 0.1
    assert yoy_change_pct(96666.0, 100000.0) == -3.3


def test_yoy_change_is_zero_without_year_ago_value():
    assert yoy_change_pct(250000.0, 0.0) == 0.0
    assert yoy_change_pct(250000.0, -1.0) == 0.0


def test_to_record_drops_empty_state_and_non_positive_values():
    assert to_record(_row(state="")) is None
    assert to_record(_row(current=0.0)) is None
    assert to_record(_row(current=None)) is None

    rec = to_record(_row(year_ago=None))
    assert rec is not None
    assert rec.zhvi_change_yoy == 0.0


@pytest.mark.asyncio
async def test_fetch_zhvi_keeps_usable_rows():
    source = FakeHomeValueSource(
        [
            _row(),
            _row(name="Harris County", state="TX", current=300000.0, year_ago=310000.0),
            _row(name="Nowhere", state=""),
            _row(name="Ghost County", current=0.0),
        ]
    )
    snap = await fetch_zhvi(source)

    assert snap.source == "Zillow Research ZHVI"
    assert [(r.region_name, r.zhvi_change_yoy) for r in snap.data] == [
        ("Wayne County", 5.0),
        ("Harris County", -3.2),
    ]


@pytest.mark.asyncio
async def test_fetch_zhvi_marks_source_on_failure():
    snap = await fetch_zhvi(FakeHomeValueSource(error=SourceUnavailable("timeout")))
    assert snap.source == "Zillow Research - FETCH ERROR"
    assert snap.data == []


@pytest.mark.asyncio
async def test_fetch_zhvi_without_source():
    snap = await fetch_zhvi(None)
    assert snap.source == "Zillow Research - FETCH ERROR"
    assert snap.data == []
