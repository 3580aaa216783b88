# app/entrypoints/fastapi_app.py
from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..config import settings
from ..connectors.base import CensusSource, EconomicSeriesSource, HomeValueIndexSource
from .api.deps import Caches, DataSources
from .api.routers import analyze, auctions, census, foreclosures, health, market, reference


def create_app(
    *,
    census_source: CensusSource | None = None,
    series_source: EconomicSeriesSource | None = None,
    home_value_source: HomeValueIndexSource | None = None,
) -> FastAPI:
    app = FastAPI(title="Auction Intel API", version=settings.API_VERSION)

    # One set of caches per app instance
    app.state.sources = DataSources(
        census=census_source,
        series=series_source,
        home_values=home_value_source,
    )
    app.state.caches = Caches()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "Accept"],
    )

    # Routers
    app.include_router(health.router)
    app.include_router(reference.router)
    app.include_router(analyze.router)
    app.include_router(census.router)
    app.include_router(foreclosures.router)
    app.include_router(auctions.router)
    app.include_router(market.router)

    return app
