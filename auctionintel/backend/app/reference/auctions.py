# app/reference/auctions.py
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class AuctionListing:
    id: str
    state: str
    county: str
    sale_type: str  # "Tax Lien" | "Tax Deed" | "Sheriff Sale" | "Repository Sale"
    sale_date: str
    property_count: int
    deposit_required: float
    registration_deadline: str
    platform: str
    platform_url: str
    auction_type: str  # "Online" | "In-Person" | "Hybrid"
    notes: str


@dataclass(frozen=True)
class AuctionPlatform:
    name: str
    url: str
    states_covered: tuple[str, ...]
    auction_types: tuple[str, ...]
    registration_required: bool
    deposit_info: str


AUCTION_PLATFORMS: tuple[AuctionPlatform, ...] = (
    AuctionPlatform(
        name="Bid4Assets",
        url="https://www.bid4assets.com",
        states_covered=("PA", "CA", "WA", "NJ", "MD", "VA", "GA"),
        auction_types=("Tax Deed", "Sheriff Sale", "Tax Lien"),
        registration_required=True,
        deposit_info="$500-$2,500 depending on county",
    ),
    AuctionPlatform(
        name="RealAuction",
        url="https://www.realauction.com",
        states_covered=("FL", "TX", "AZ", "GA"),
        auction_types=("Tax Lien", "Tax Deed"),
        registration_required=True,
        deposit_info="$500-$2,000 depending on county",
    ),
    AuctionPlatform(
        name="GovEase",
        url="https://www.govease.com",
        states_covered=("IN", "IL", "MI", "OH"),
        auction_types=("Tax Lien", "Tax Deed"),
        registration_required=True,
        deposit_info="Varies by county",
    ),
    AuctionPlatform(
        name="Zeusauction",
        url="https://www.zeusauction.com",
        states_covered=("NJ", "NY"),
        auction_types=("Tax Lien",),
        registration_required=True,
        deposit_info="Varies by municipality",
    ),
    AuctionPlatform(
        name="SRI (Grant Street Group)",
        url="https://www.tax-sale.info",
        states_covered=("TX", "GA", "FL"),
        auction_types=("Tax Deed",),
        registration_required=True,
        deposit_info="$1,000-$5,000",
    ),
)


UPCOMING_AUCTIONS: tuple[AuctionListing, ...] = (
    AuctionListing(
        "PA-MONROE-2026-01", "PA", "Monroe", "Repository Sale", "2026-01-14", 150, 500.0, "2026-01-07",
        "Bid4Assets", "https://www.bid4assets.com/monroe-pa", "Online", "Poconos region - Repository sale",
    ),
    AuctionListing(
        "PA-PHILA-2026-01", "PA", "Philadelphia", "Sheriff Sale", "2026-01-21", 400, 600.0, "2026-01-14",
        "Bid4Assets", "https://www.bid4assets.com/philadelphia", "Online", "Real property list - Jan 21 sale",
    ),
    AuctionListing(
        "TX-HARRIS-2026-02", "TX", "Harris", "Tax Deed", "2026-02-03", 450, 2500.0, "2026-01-27",
        "County", "https://www.hctax.net", "In-Person", "First Tuesday - 25% penalty on redemption",
    ),
    AuctionListing(
        "TX-DALLAS-2026-02", "TX", "Dallas", "Tax Deed", "2026-02-03", 380, 2000.0, "2026-01-27",
        "RealAuction", "https://www.realauction.com", "Online", "Online auction - 1st Tuesday",
    ),
    AuctionListing(
        "FL-PALM-2026-01-W2", "FL", "Palm Beach", "Tax Deed", "2026-01-14", 50, 1000.0, "2026-01-09",
        "RealAuction", "https://www.mypalmbeachclerk.com", "Online", "Weekly auction - Wednesdays 9:30am",
    ),
    AuctionListing(
        "FL-LEE-2026-01", "FL", "Lee", "Tax Deed", "2026-01-14", 35, 500.0, "2026-01-07",
        "RealAuction", "https://www.leetc.com", "Online", "Tuesdays 10am online",
    ),
    AuctionListing(
        "AZ-MARICOPA-2026-02", "AZ", "Maricopa", "Tax Lien", "2026-02-15", 2500, 500.0, "2026-02-01",
        "RealAuction", "https://treasurer.maricopa.gov", "Online", "Phoenix area - 16% max interest, bid-down",
    ),
    AuctionListing(
        "AZ-PIMA-2026-02", "AZ", "Pima", "Tax Lien", "2026-02-22", 800, 300.0, "2026-02-08",
        "RealAuction", "https://www.pima.gov", "Online", "Tucson - annual February sale",
    ),
    AuctionListing(
        "GA-FULTON-2026-02", "GA", "Fulton", "Tax Lien", "2026-02-03", 300, 1000.0, "2026-01-27",
        "County", "https://www.fultoncountyga.gov", "In-Person", "Atlanta - 20% escalating to 40%",
    ),
    AuctionListing(
        "IA-POLK-2026-06", "IA", "Polk", "Tax Lien", "2026-06-15", 200, 500.0, "2026-06-01",
        "County", "https://www.polkcountyiowa.gov", "In-Person", "Des Moines - 24% rate (highest in US!)",
    ),
    AuctionListing(
        "NJ-ESSEX-2026-01", "NJ", "Essex", "Tax Lien", "2026-01-28", 180, 1000.0, "2026-01-21",
        "Zeusauction", "https://www.zeusauction.com", "Online", "Newark area - 18% bid-down",
    ),
)


def state_auctions(state: str) -> list[AuctionListing]:
    st = state.upper()
    return [a for a in UPCOMING_AUCTIONS if a.state == st]


def state_platforms(state: str) -> list[AuctionPlatform]:
    st = state.upper()
    return [p for p in AUCTION_PLATFORMS if st in p.states_covered]


def auction_stats() -> dict[str, Any]:
    return {
        "total_upcoming": len(UPCOMING_AUCTIONS),
        "by_state": dict(Counter(a.state for a in UPCOMING_AUCTIONS)),
        "total_properties": sum(a.property_count for a in UPCOMING_AUCTIONS),
    }
