# tests/test_reference.py
from datetime import date

from app.reference.auctions import auction_stats, state_auctions, state_platforms
from app.reference.counties import COUNTIES, list_counties
from app.reference.foreclosures import foreclosure_stats, national_trends, state_foreclosures
from app.reference.states import FIPS_TO_STATE, STATE_FIPS, get_state_info, list_state_info, list_states


def test_states_cover_50_plus_dc_sorted():
    states = list_states()
    assert len(states) == 51
    assert states == sorted(states)
    assert "DC" in states


def test_state_info_filter_is_case_insensitive():
    liens = list_state_info("LIEN")
    deeds = list_state_info("deed")

    assert len(liens) == 26
    assert len(deeds) == 25
    assert {s.sale_type for s in liens} == {"Lien"}
    assert [s.name for s in liens] == sorted(s.name for s in liens)
    assert list_state_info("Redeemable") == []


def test_state_info_sorted_by_name():
    rows = list_state_info()
    assert len(rows) == 51
    assert rows[0].name == "Alabama"
    assert rows[-1].name == "Wyoming"


def test_get_state_info_is_zero_or_one():
    ia = get_state_info("ia")
    assert ia is not None
    assert ia.name == "Iowa"
    assert ia.interest_rate == "24%"
    assert get_state_info("ZZ") is None


def test_fips_round_trip():
    assert STATE_FIPS["MI"] == "26"
    assert FIPS_TO_STATE["26"] == "MI"
    assert "72" not in FIPS_TO_STATE


def test_counties_sorted_by_tier_then_growth():
    mi = list_counties("mi")
    assert [(c.name, c.tier) for c in mi] == [("Oakland", 1), ("Wayne", 2)]

    everything = list_counties()
    assert len(everything) == sum(len(v) for v in COUNTIES.values())
    keys = [(c.tier, -c.growth) for c in everything]
    assert keys == sorted(keys)


def test_unknown_state_has_no_counties():
    assert list_counties("ZZ") == []


def test_state_foreclosures():
    fl = state_foreclosures("fl")
    assert len(fl) == 5
    assert {p.state for p in fl} == {"FL"}
    assert {p.status for p in fl} == {"Available"}
    assert {p.listing_date for p in fl} == {date.today().isoformat()}
    assert state_foreclosures("ZZ") == []


def test_foreclosure_stats_cover_every_state():
    stats = foreclosure_stats()
    assert len(stats) == 51
    assert stats["MI"].state_name == "Michigan"
    assert stats["FL"].total_listings == 45000


def test_national_trends():
    t = national_trends()
    assert t.total_states == 51
    assert t.top_state == "FL"
    assert t.top_state_count == 45000
    assert t.total_foreclosures == 388950
    assert t.avg_foreclosure_rate == round(t.avg_foreclosure_rate, 2)
    assert (t.month, t.year) == ("January", 2026)


def test_state_auctions_and_platforms():
    tx = state_auctions("tx")
    assert [a.county for a in tx] == ["Harris", "Dallas"]
    assert state_auctions("ZZ") == []

    ga = [p.name for p in state_platforms("ga")]
    assert ga == ["Bid4Assets", "RealAuction", "SRI (Grant Street Group)"]


def test_auction_stats():
    stats = auction_stats()
    assert stats["total_upcoming"] == 11
    assert stats["total_properties"] == 5445
    assert stats["by_state"] == {"PA": 2, "TX": 2, "FL": 2, "AZ": 2, "GA": 1, "IA": 1, "NJ": 1}
