# app/entrypoints/api/routers/foreclosures.py
from __future__ import annotations

from fastapi import APIRouter

from ....reference.foreclosures import foreclosure_stats, national_trends, state_foreclosures
from ....schemas import (
    ForeclosurePropertyOut,
    ForeclosureStatsResponse,
    ForeclosureSummaryOut,
    NationalTrendsOut,
    StateForeclosuresResponse,
)
from ....service_layer.cache import utc_now_iso

router = APIRouter(prefix="/api/foreclosures", tags=["foreclosures"])


@router.get("", response_model=ForeclosureStatsResponse)
def all_stats() -> ForeclosureStatsResponse:
    return ForeclosureStatsResponse(
        updated=utc_now_iso(),
        source="HUD, Fannie Mae, Freddie Mac - Aggregated",
        states={st: ForeclosureSummaryOut.model_validate(s) for st, s in foreclosure_stats().items()},
    )


# Registered before /{state} so "trends" is not read as a state
@router.get("/trends", response_model=NationalTrendsOut)
def trends() -> NationalTrendsOut:
    return NationalTrendsOut.model_validate(national_trends())


@router.get("/{state}", response_model=StateForeclosuresResponse)
def by_state(state: str) -> StateForeclosuresResponse:
    return StateForeclosuresResponse(
        state=state.upper(),
        updated=utc_now_iso(),
        source="HUD/Fannie/Freddie",
        properties=[ForeclosurePropertyOut.model_validate(p) for p in state_foreclosures(state)],
    )
