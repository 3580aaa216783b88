# app/entrypoints/api/routers/auctions.py
from __future__ import annotations

from fastapi import APIRouter

from ....reference.auctions import AUCTION_PLATFORMS, UPCOMING_AUCTIONS, AuctionListing, state_auctions
from ....schemas import AuctionListingOut, AuctionPlatformOut, AuctionsResponse, PlatformsResponse
from ....service_layer.cache import utc_now_iso

router = APIRouter(prefix="/api/auctions", tags=["auctions"])


def _response(listings: list[AuctionListing]) -> AuctionsResponse:
    return AuctionsResponse(
        updated=utc_now_iso(),
        total=len(listings),
        auctions=[AuctionListingOut.model_validate(a) for a in listings],
    )


@router.get("", response_model=AuctionsResponse)
def upcoming() -> AuctionsResponse:
    return _response(list(UPCOMING_AUCTIONS))


@router.get("/platforms", response_model=PlatformsResponse)
def platforms() -> PlatformsResponse:
    return PlatformsResponse(platforms=[AuctionPlatformOut.model_validate(p) for p in AUCTION_PLATFORMS])


@router.get("/{state}", response_model=AuctionsResponse)
def by_state(state: str) -> AuctionsResponse:
    return _response(state_auctions(state))
