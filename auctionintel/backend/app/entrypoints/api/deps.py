# app/entrypoints/api/deps.py
from __future__ import annotations

from dataclasses import dataclass, field

from fastapi import Request

from ...config import settings
from ...connectors.base import CensusSource, EconomicSeriesSource, HomeValueIndexSource
from ...service_layer.cache import TtlCache
from ...service_layer.census import CountyCensusData
from ...service_layer.market import MarketData


@dataclass
class DataSources:
    # Unset sources degrade: census/zhvi report an error, rates fall back
    census: CensusSource | None = None
    series: EconomicSeriesSource | None = None
    home_values: HomeValueIndexSource | None = None


@dataclass
class Caches:
    census: TtlCache[list[CountyCensusData]] = field(
        default_factory=lambda: TtlCache(settings.CENSUS_CACHE_TTL_S)
    )
    market: TtlCache[MarketData] = field(
        default_factory=lambda: TtlCache(settings.MARKET_CACHE_TTL_S)
    )


def get_sources(request: Request) -> DataSources:
    return request.app.state.sources


def get_caches(request: Request) -> Caches:
    return request.app.state.caches
