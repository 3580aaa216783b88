# app/reference/market.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RedfinRecord:
    region: str
    region_type: str
    median_dom: float
    sale_to_list: float
    inventory: int
    price_drop_pct: float
    homes_sold: int


# Redfin publishes gzipped TSV; the front end gets this curated sample
REDFIN_MARKET: tuple[RedfinRecord, ...] = (
    RedfinRecord("National", "country", 32.0, 0.987, 1_250_000, 18.5, 425_000),
    RedfinRecord("California", "state", 28.0, 0.995, 85_000, 15.2, 42_000),
    RedfinRecord("Texas", "state", 35.0, 0.978, 120_000, 22.1, 55_000),
    RedfinRecord("Florida", "state", 42.0, 0.965, 145_000, 28.3, 48_000),
    RedfinRecord("New York", "state", 38.0, 0.982, 65_000, 16.8, 28_000),
)


@dataclass(frozen=True)
class MortgageRates:
    rate_30yr: float
    rate_15yr: float
    rate_5yr_arm: float
    change_30yr: float  # week-over-week
    change_15yr: float


@dataclass(frozen=True)
class EconomicIndicator:
    name: str
    value: float
    unit: str
    change: float
    trend: str  # up | down | stable


@dataclass(frozen=True)
class HousingStats:
    median_home_price: float
    yoy_change: float
    inventory_months: float
    days_on_market: int


# FRED: MORTGAGE30US, MORTGAGE15US
CURRENT_RATES = MortgageRates(
    rate_30yr=6.62,
    rate_15yr=5.89,
    rate_5yr_arm=6.08,
    change_30yr=-0.04,
    change_15yr=-0.02,
)

ECONOMIC_INDICATORS: tuple[EconomicIndicator, ...] = (
    EconomicIndicator("Federal Funds Rate", 4.33, "%", 0.0, "stable"),
    EconomicIndicator("Inflation Rate (CPI)", 2.9, "%", -0.1, "down"),
    EconomicIndicator("Unemployment Rate", 4.1, "%", 0.0, "stable"),
    EconomicIndicator("Housing Starts", 1.499, "M units", 0.03, "up"),
    EconomicIndicator("10-Year Treasury", 4.68, "%", 0.05, "up"),
    EconomicIndicator("Consumer Confidence", 104.7, "index", 2.3, "up"),
)

# NAR existing-home figures
HOUSING_STATS = HousingStats(
    median_home_price=417700.0,
    yoy_change=4.2,
    inventory_months=3.8,
    days_on_market=62,
)
