# app/reference/states.py
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


STATE_NAMES: Mapping[str, str] = MappingProxyType({
    "AL": "Alabama", "AK": "Alaska", "AZ": "Arizona", "AR": "Arkansas",
    "CA": "California", "CO": "Colorado", "CT": "Connecticut", "DE": "Delaware",
    "DC": "District of Columbia", "FL": "Florida", "GA": "Georgia", "HI": "Hawaii",
    "ID": "Idaho", "IL": "Illinois", "IN": "Indiana", "IA": "Iowa",
    "KS": "Kansas", "KY": "Kentucky", "LA": "Louisiana", "ME": "Maine",
    "MD": "Maryland", "MA": "Massachusetts", "MI": "Michigan", "MN": "Minnesota",
    "MS": "Mississippi", "MO": "Missouri", "MT": "Montana", "NE": "Nebraska",
    "NV": "Nevada", "NH": "New Hampshire", "NJ": "New Jersey", "NM": "New Mexico",
    "NY": "New York", "NC": "North Carolina", "ND": "North Dakota", "OH": "Ohio",
    "OK": "Oklahoma", "OR": "Oregon", "PA": "Pennsylvania", "RI": "Rhode Island",
    "SC": "South Carolina", "SD": "South Dakota", "TN": "Tennessee", "TX": "Texas",
    "UT": "Utah", "VT": "Vermont", "VA": "Virginia", "WA": "Washington",
    "WV": "West Virginia", "WI": "Wisconsin", "WY": "Wyoming",
})

STATE_FIPS: Mapping[str, str] = MappingProxyType({
    "AL": "01", "AK": "02", "AZ": "04", "AR": "05", "CA": "06", "CO": "08",
    "CT": "09", "DE": "10", "DC": "11", "FL": "12", "GA": "13", "HI": "15",
    "ID": "16", "IL": "17", "IN": "18", "IA": "19", "KS": "20", "KY": "21",
    "LA": "22", "ME": "23", "MD": "24", "MA": "25", "MI": "26", "MN": "27",
    "MS": "28", "MO": "29", "MT": "30", "NE": "31", "NV": "32", "NH": "33",
    "NJ": "34", "NM": "35", "NY": "36", "NC": "37", "ND": "38", "OH": "39",
    "OK": "40", "OR": "41", "PA": "42", "RI": "44", "SC": "45", "SD": "46",
    "TN": "47", "TX": "48", "UT": "49", "VT": "50", "VA": "51", "WA": "53",
    "WV": "54", "WI": "55", "WY": "56",
})

FIPS_TO_STATE: Mapping[str, str] = MappingProxyType({v: k for k, v in STATE_FIPS.items()})


@dataclass(frozen=True)
class StateAuctionInfo:
    abbr: str
    name: str
    sale_type: str  # "Lien" | "Deed"
    interest_rate: str
    redemption_period: str
    notes: str


# (abbr, sale type, interest rate, redemption period, notes)
_AUCTION_ROWS: tuple[tuple[str, str, str, str, str], ...] = (
    # Lien states
    ("AL", "Lien", "12%", "3 years", "Most sales May-June; 12% interest from date of sale"),
    ("AZ", "Lien", "16%", "3 years", "Bid-down process; max 16% simple interest"),
    ("CO", "Lien", "Fed rate + 9pts", "3 years", "Premium bidding; no premium reimbursement"),
    ("CT", "Lien", "18%", "6 months", "Combined lien/deed format; larger towns only"),
    ("DC", "Lien", "18%", "6 months - 1 year", "Premium bidding; no interest on overbid"),
    ("FL", "Lien", "18%", "2 years", "Bid-down; guaranteed 5% minimum return"),
    ("GA", "Lien", "20-40%", "1 year", "20% year 1; escalates to 30% after 2yrs, 40% after 3yrs"),
    ("IL", "Lien", "18%", "2 years", "Bid-down from 18%; graduated penalty redemption"),
    ("IN", "Lien", "Graduated", "1 year", "A/B/C Sales process; Commissioner's Sale for county-titled"),
    ("IA", "Lien", "24%", "1 year 9 months", "Bid least undivided ownership interest; highest rate"),
    ("KY", "Lien", "12%", "1 year", "12% interest from date of issuance"),
    ("LA", "Lien", "Bid-down", "3 years", "2024-2025 reform: bid-down interest system; online now available"),
    ("MD", "Lien", "18-24%", "6 months", "Statutory 6% but most counties charge 18-24%"),
    ("MA", "Lien", "16%", "Collector's deed", "Smallest undivided part auction; 16% rate"),
    ("MS", "Lien", "18%", "2 years", "Tax lien state"),
    ("MO", "Lien", "10%", "2 years", "10% interest; 18% penalty each year delinquent"),
    ("MT", "Lien", "10%", "2-3 years", "5/6 of 1% per month (10% per annum)"),
    ("NE", "Lien", "14%", "3 years", "Undivided interest at 14% per annum"),
    ("NH", "Lien", "18%", "2 years", "Auction for percentage of undivided interest"),
    ("NJ", "Lien", "18%", "2 years", "Bid-down from 18%; active market"),
    ("OK", "Lien", "8%", "2 years", "Multiple bidders decided by random drawing"),
    ("RI", "Lien", "10% + 1%/mo", "1 year", "Collector's Deed; 10% first 6mo, 1%/mo after"),
    ("SC", "Lien", "8% penalty", "1 year", "Highest and best bidder wins"),
    ("SD", "Lien", "12% (max 10% bid)", "3-4 years", "Bid-down from 10%; 12% statutory"),
    ("WV", "Lien", "12%", "1 year", "Highest bidder at public auction"),
    ("WY", "Lien", "15% + 3% penalty", "4 years", "Longest redemption; 15% + 3% penalty + fees"),
    # Deed states
    ("AK", "Deed", "N/A", "1 year", "Municipal foreclosure; deeded to borough/city if unredeemed"),
    ("AR", "Deed", "N/A", "30 days", "Forfeited to state; limited warranty deed after 30 days"),
    ("CA", "Deed", "N/A", "5 years (3 for some)", "Tax Collector's Deed; free of pre-existing encumbrances"),
    ("DE", "Deed", "15%", "60 days", "Judicial foreclosure; 15% penalty on redemption"),
    ("HI", "Deed", "N/A", "1 year", "3-year lien before auction; 1-year redemption after sale"),
    ("ID", "Deed", "N/A", "3 years before deed", "Tax deed to county after 3 years; then sold at auction"),
    ("KS", "Deed", "N/A", "Court judgment", "Bid off to county; court petition for foreclosure"),
    ("ME", "Deed", "N/A", "18 months", "Tax lien mortgage auto-forecloses after 18 months"),
    ("MI", "Deed", "N/A", "None after sale", "Forfeit lands; auction 3rd Tuesday July; min bid = taxes + FMV"),
    ("MN", "Deed", "N/A", "None after sale", "Tax-forfeited land auctions; cash or installment"),
    ("NV", "Deed", "N/A", "2 years before deed", "Tax deed to Treasurer after 2yr; then auction"),
    ("NM", "Deed", "N/A", "120 days IRS only", "No owner redemption; Quitclaim Deed issued"),
    ("NY", "Deed", "N/A", "2-4 years", "2yr standard; 3-4yr for residential/farm; judicial foreclosure"),
    ("NC", "Deed", "N/A", "Upset bid period", "Judicial foreclosure or docketing certificate"),
    ("ND", "Deed", "Max 9%", "4 years", "Bid-down from 9%; 4yr redemption from due date"),
    ("OH", "Deed", "N/A", "None after sale", "Judicial foreclosure after 2yr delinquent; Sheriff's sale"),
    ("OR", "Deed", "N/A", "2 years before deed", "Foreclosure after 3yr; sold to county; 2yr redemption"),
    ("PA", "Deed", "N/A", "None after sale", "Upset Sale; min bid = taxes + interest + costs"),
    ("TN", "Deed", "N/A", "1 year", "2yr delinquent before Chancery Court suit"),
    ("TX", "Deed", "25% penalty", "6mo-2yr", "6mo non-Homestead; 2yr Homestead/Ag; 25% penalty"),
    ("UT", "Deed", "N/A", "4 years", "Preliminary sale Jan 16; final sale May 4yr later"),
    ("VT", "Deed", "N/A", "1 year", "Foreclosure after 2yr; Collector's Deed after 1yr redemption"),
    ("VA", "Deed", "N/A", "Surplus rights only", "Judicial foreclosure; 3yr after due date; surplus to former owner"),
    ("WA", "Deed", "N/A", "3 years before sale", "Certificate of delinquency after 3yr; foreclosure judgment"),
    ("WI", "Deed", "N/A", "2 years", "Tax deed after 2yr certificate; county cannot sell certificate"),
)

STATE_AUCTIONS: Mapping[str, StateAuctionInfo] = MappingProxyType({
    abbr: StateAuctionInfo(
        abbr=abbr,
        name=STATE_NAMES.get(abbr, abbr),
        sale_type=sale_type,
        interest_rate=rate,
        redemption_period=redemption,
        notes=notes,
    )
    for abbr, sale_type, rate, redemption, notes in _AUCTION_ROWS
})


def list_states() -> list[str]:
    return sorted(STATE_AUCTIONS.keys())


def list_state_info(sale_type: str | None = None) -> list[StateAuctionInfo]:
    """All state auction rules sorted by state name, optionally filtered by Lien/Deed."""
    rows = list(STATE_AUCTIONS.values())
    if sale_type is not None:
        wanted = sale_type.lower()
        rows = [s for s in rows if s.sale_type.lower() == wanted]
    return sorted(rows, key=lambda s: s.name)


def get_state_info(abbr: str) -> StateAuctionInfo | None:
    return STATE_AUCTIONS.get(abbr.upper())
