# app/entrypoints/api/routers/health.py
from __future__ import annotations

from fastapi import APIRouter

from ....config import settings
from ....schemas import HealthResponse

router = APIRouter(prefix="/api", tags=["health"])

PUBLIC_ENDPOINTS = [
    "/api/health",
    "/api/states",
    "/api/state-info",
    "/api/state-info/{abbr}",
    "/api/counties",
    "/api/analyze",
    "/api/census/counties",
    "/api/census/counties/{state}",
    "/api/foreclosures",
    "/api/foreclosures/trends",
    "/api/foreclosures/{state}",
    "/api/auctions",
    "/api/auctions/platforms",
    "/api/auctions/{state}",
    "/api/zillow/zhvi",
    "/api/redfin/market",
    "/api/rates",
    "/api/market",
]


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="healthy", version=settings.API_VERSION, endpoints=PUBLIC_ENDPOINTS)
