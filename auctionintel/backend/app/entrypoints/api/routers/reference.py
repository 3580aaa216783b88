# app/entrypoints/api/routers/reference.py
from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Query

from ....reference.counties import list_counties
from ....reference.states import StateAuctionInfo, get_state_info, list_state_info, list_states
from ....schemas import CountyOut, StateAuctionInfoOut

router = APIRouter(prefix="/api", tags=["reference"])


def _state_out(info: StateAuctionInfo) -> StateAuctionInfoOut:
    # sale_type goes out on the wire as "type"
    return StateAuctionInfoOut(**asdict(info))


@router.get("/states", response_model=list[str])
def states() -> list[str]:
    return list_states()


@router.get("/state-info", response_model=list[StateAuctionInfoOut])
def all_state_info(
    sale_type: str | None = Query(default=None, alias="type"),
) -> list[StateAuctionInfoOut]:
    return [_state_out(s) for s in list_state_info(sale_type)]


@router.get("/state-info/{abbr}", response_model=StateAuctionInfoOut | None)
def state_info(abbr: str) -> StateAuctionInfoOut | None:
    # Unknown abbreviations are a null body, not a 404
    info = get_state_info(abbr)
    return _state_out(info) if info is not None else None


@router.get("/counties", response_model=list[CountyOut])
def counties(state: str | None = Query(default=None)) -> list[CountyOut]:
    return [CountyOut.model_validate(c) for c in list_counties(state)]
