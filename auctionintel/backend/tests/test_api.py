# tests/test_api.py
from fastapi.testclient import TestClient

from app.config import settings
from app.connectors.base import SeriesObservation
from app.entrypoints.fastapi_app import create_app
from app.service_layer.rates import SERIES_MORTGAGE_30YR

from conftest import FakeSeriesSource

SATURATED = {
    "population": 500000,
    "median_income": 80000,
    "growth_yoy": 5.0,
    "days_on_market": 29,
    "transaction_volume": 10000,
    "employment_rate": 96.0,
}


def test_health(bare_client):
    r = bare_client.get("/api/health")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "healthy"
    assert body["version"] == settings.API_VERSION
    assert "/api/analyze" in body["endpoints"]


def test_analyze_wire_format(bare_client):
    r = bare_client.post("/api/analyze", json=SATURATED)
    assert r.status_code == 200
    assert r.json() == {
        "score": 100.0,
        "tier": 1,
        "name": "Prime Investor",
        "action": "PURSUE",
        "recommendation": "Exceptional liquidity and growth fundamentals.",
    }


def test_analyze_accepts_out_of_range_values(bare_client):
    body = dict(SATURATED, population=-10, employment_rate=250.0, days_on_market=-5)
    r = bare_client.post("/api/analyze", json=body)
    assert r.status_code == 200
    assert r.json()["tier"] in {1, 2, 3, 4, 5}


def test_analyze_rejects_wrong_types(bare_client):
    r = bare_client.post("/api/analyze", json=dict(SATURATED, population="lots"))
    assert r.status_code == 422

    r = bare_client.post("/api/analyze", json={"population": 1})
    assert r.status_code == 422


def test_analyze_bounds_ints_to_i64(bare_client):
    for too_big in (10**400, 2**63, -(2**63) - 1):
        r = bare_client.post("/api/analyze", json=dict(SATURATED, population=too_big))
        assert r.status_code == 422

    r = bare_client.post("/api/analyze", json=dict(SATURATED, population=2**63 - 1, transaction_volume=-(2**63)))
    assert r.status_code == 200
    assert r.json()["tier"] in {1, 2, 3, 4, 5}


def test_states_and_state_info(bare_client):
    assert len(bare_client.get("/api/states").json()) == 51

    liens = bare_client.get("/api/state-info", params={"type": "lien"}).json()
    assert len(liens) == 26
    assert all(s["type"] == "Lien" for s in liens)
    assert "sale_type" not in liens[0]


def test_state_info_unknown_is_null(bare_client):
    r = bare_client.get("/api/state-info/zz")
    assert r.status_code == 200
    assert r.json() is None

    mi = bare_client.get("/api/state-info/mi").json()
    assert mi["abbr"] == "MI"
    assert mi["type"] == "Deed"


def test_counties(bare_client):
    body = bare_client.get("/api/counties", params={"state": "MI"}).json()
    assert [c["name"] for c in body] == ["Oakland", "Wayne"]
    assert set(body[0]) == {"name", "state", "tier", "pop", "income", "zhvi", "growth", "dom", "notes"}


def test_census_counties(client, census_source):
    body = client.get("/api/census/counties").json()
    assert body["source"] == "US Census Bureau ACS 2022"
    assert body["total_counties"] == 4
    assert body["data"][0]["fips"] == "26163"

    state = client.get("/api/census/counties/la").json()
    assert state["source"] == "US Census Bureau ACS 2022 - LA"
    assert [c["name"] for c in state["data"]] == ["Orleans"]
    # second request served from the app's cache
    assert census_source.calls == 1


def test_census_without_source_is_error_marked_not_5xx(bare_client):
    r = bare_client.get("/api/census/counties")
    assert r.status_code == 200
    body = r.json()
    assert body["updated"] == "error"
    assert body["source"].startswith("Census API Error")
    assert body["total_counties"] == 0
    assert body["data"] == []


def test_foreclosure_routes(bare_client):
    stats = bare_client.get("/api/foreclosures").json()
    assert len(stats["states"]) == 51

    trends = bare_client.get("/api/foreclosures/trends").json()
    assert trends["top_state"] == "FL"

    fl = bare_client.get("/api/foreclosures/fl").json()
    assert fl["state"] == "FL"
    assert len(fl["properties"]) == 5


def test_auction_routes(bare_client):
    all_ = bare_client.get("/api/auctions").json()
    assert all_["total"] == 11

    platforms = bare_client.get("/api/auctions/platforms").json()["platforms"]
    assert len(platforms) == 5
    assert platforms[0]["states_covered"][0] == "PA"

    az = bare_client.get("/api/auctions/az").json()
    assert az["total"] == 2
    assert {a["county"] for a in az["auctions"]} == {"Maricopa", "Pima"}


def test_zhvi_without_source(bare_client):
    body = bare_client.get("/api/zillow/zhvi").json()
    assert body["source"] == "Zillow Research - FETCH ERROR"
    assert body["record_count"] == 0


def test_redfin_market(bare_client):
    body = bare_client.get("/api/redfin/market").json()
    assert body["record_count"] == 5
    assert body["data"][0]["region"] == "National"


def test_rates_fallback_without_key(bare_client, monkeypatch):
    monkeypatch.setattr(settings, "FRED_API_KEY", None)
    body = bare_client.get("/api/rates").json()
    assert body["source"] == "Fallback Data"
    assert body["mortgage_30yr"] == 6.72
    assert body["unemployment_rate"] == 4.1


def test_rates_live_with_key(monkeypatch):
    monkeypatch.setattr(settings, "FRED_API_KEY", "real-key")
    source = FakeSeriesSource({SERIES_MORTGAGE_30YR: [SeriesObservation("2026-10-15", 6.31)]})
    client = TestClient(create_app(series_source=source))

    body = client.get("/api/rates").json()
    assert body["source"] == "FRED API (Live)"
    assert body["mortgage_30yr"] == 6.31
    assert body["updated"] == "2026-10-15"
    assert body["mortgage_15yr"] == 5.92


def test_market(bare_client):
    body = bare_client.get("/api/market").json()
    assert body["mortgage_rates"]["rate_30yr"] == 6.62
    assert body["mortgage_rates"]["source"] == "Federal Reserve (FRED)"
    assert len(body["indicators"]) == 6
    assert body["housing_stats"]["median_home_price"] == 417700.0


def test_cors_allows_configured_origin(bare_client):
    origin = settings.CORS_ORIGINS[0]
    r = bare_client.options(
        "/api/analyze",
        headers={"Origin": origin, "Access-Control-Request-Method": "POST"},
    )
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == origin


def test_cors_rejects_unknown_origin(bare_client):
    r = bare_client.options(
        "/api/analyze",
        headers={"Origin": "https://evil.example", "Access-Control-Request-Method": "POST"},
    )
    assert r.status_code == 400
