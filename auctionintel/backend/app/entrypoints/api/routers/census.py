# app/entrypoints/api/routers/census.py
from __future__ import annotations

from fastapi import APIRouter, Depends

from ....config import settings
from ....schemas import CensusCountiesResponse, CensusCountyOut
from ....service_layer.census import CensusSnapshot, census_snapshot
from ..deps import Caches, DataSources, get_caches, get_sources

router = APIRouter(prefix="/api/census", tags=["census"])


def _response(snap: CensusSnapshot) -> CensusCountiesResponse:
    return CensusCountiesResponse(
        updated=snap.updated,
        source=snap.source,
        total_counties=len(snap.counties),
        data=[CensusCountyOut.model_validate(c) for c in snap.counties],
    )


@router.get("/counties", response_model=CensusCountiesResponse)
async def census_counties(
    sources: DataSources = Depends(get_sources),
    caches: Caches = Depends(get_caches),
) -> CensusCountiesResponse:
    snap = await census_snapshot(sources.census, caches.census, api_key=settings.CENSUS_API_KEY)
    return _response(snap)


@router.get("/counties/{state}", response_model=CensusCountiesResponse)
async def census_state_counties(
    state: str,
    sources: DataSources = Depends(get_sources),
    caches: Caches = Depends(get_caches),
) -> CensusCountiesResponse:
    snap = await census_snapshot(
        sources.census, caches.census, state=state, api_key=settings.CENSUS_API_KEY
    )
    return _response(snap)
