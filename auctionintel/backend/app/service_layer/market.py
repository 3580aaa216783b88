# app/service_layer/market.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from ..reference.market import (
    CURRENT_RATES,
    ECONOMIC_INDICATORS,
    HOUSING_STATS,
    EconomicIndicator,
    HousingStats,
    MortgageRates,
)
from .cache import TtlCache

MARKET_KEY = "snapshot"
MARKET_SOURCE_LABEL = "Federal Reserve (FRED)"


@dataclass(frozen=True)
class MarketData:
    mortgage_rates: MortgageRates
    indicators: tuple[EconomicIndicator, ...]
    housing_stats: HousingStats
    timestamp: str
    rates_updated: str
    indicators_updated: str
    source: str = MARKET_SOURCE_LABEL


async def get_market_data(cache: TtlCache[MarketData]) -> MarketData:
    """Rates, indicators and housing stats. The timestamp only moves when the cache refreshes."""

    async def _build() -> MarketData:
        now = datetime.now(timezone.utc)
        return MarketData(
            mortgage_rates=CURRENT_RATES,
            indicators=ECONOMIC_INDICATORS,
            housing_stats=HOUSING_STATS,
            timestamp=now.strftime("%Y-%m-%d %H:%M:%S UTC"),
            rates_updated=now.strftime("%Y-%m-%d %H:%M UTC"),
            indicators_updated=now.strftime("%Y-%m-%d"),
        )

    return await cache.get_or_fetch(MARKET_KEY, _build)
