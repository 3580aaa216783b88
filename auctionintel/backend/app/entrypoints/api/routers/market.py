# app/entrypoints/api/routers/market.py
from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends

from ....config import settings
from ....reference.market import REDFIN_MARKET
from ....schemas import (
    EconomicIndicatorOut,
    HousingStatsOut,
    MarketDataResponse,
    MortgageRatesOut,
    RatesResponse,
    RedfinRecordOut,
    RedfinResponse,
    ZhviRecordOut,
    ZhviResponse,
)
from ....service_layer.cache import utc_now_iso
from ....service_layer.home_values import fetch_zhvi
from ....service_layer.market import get_market_data
from ....service_layer.rates import fetch_live_rates
from ..deps import Caches, DataSources, get_caches, get_sources

router = APIRouter(prefix="/api", tags=["market"])


@router.get("/zillow/zhvi", response_model=ZhviResponse)
async def zillow_zhvi(sources: DataSources = Depends(get_sources)) -> ZhviResponse:
    snap = await fetch_zhvi(sources.home_values)
    return ZhviResponse(
        updated=snap.updated,
        source=snap.source,
        record_count=len(snap.data),
        data=[ZhviRecordOut.model_validate(r) for r in snap.data],
    )


@router.get("/redfin/market", response_model=RedfinResponse)
def redfin_market() -> RedfinResponse:
    return RedfinResponse(
        updated=utc_now_iso(),
        source="Redfin Data Center",
        record_count=len(REDFIN_MARKET),
        data=[RedfinRecordOut.model_validate(r) for r in REDFIN_MARKET],
    )


@router.get("/rates", response_model=RatesResponse)
async def rates(sources: DataSources = Depends(get_sources)) -> RatesResponse:
    live = await fetch_live_rates(sources.series, settings.FRED_API_KEY)
    return RatesResponse(
        updated=live.updated,
        source=live.source,
        mortgage_30yr=live.mortgage_30yr,
        mortgage_15yr=live.mortgage_15yr,
        mortgage_30yr_change=live.mortgage_30yr_change,
        unemployment_rate=live.unemployment,
        fed_funds=live.fed_funds,
        treasury_10yr=live.treasury_10yr,
    )


@router.get("/market", response_model=MarketDataResponse)
async def market(caches: Caches = Depends(get_caches)) -> MarketDataResponse:
    data = await get_market_data(caches.market)
    return MarketDataResponse(
        mortgage_rates=MortgageRatesOut(
            **asdict(data.mortgage_rates), updated=data.rates_updated, source=data.source
        ),
        indicators=[
            EconomicIndicatorOut(**asdict(i), updated=data.indicators_updated) for i in data.indicators
        ],
        housing_stats=HousingStatsOut.model_validate(data.housing_stats),
        timestamp=data.timestamp,
    )
