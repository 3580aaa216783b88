from pydantic import BaseModel, ConfigDict, Field

from .domain.numbers import I64_MAX, I64_MIN


class _FromAttrs(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class HealthResponse(BaseModel):
    status: str = "healthy"
    version: str
    endpoints: list[str]


# ----- Scoring -----

class AnalysisIn(BaseModel):
    # Ints only bounded to i64; anything else out of range is clamped by the engine
    population: int = Field(..., ge=I64_MIN, le=I64_MAX)
    median_income: int = Field(..., ge=I64_MIN, le=I64_MAX)
    growth_yoy: float
    days_on_market: int = Field(..., ge=I64_MIN, le=I64_MAX)
    transaction_volume: int = Field(..., ge=I64_MIN, le=I64_MAX)
    employment_rate: float


class AnalysisOut(BaseModel):
    score: float
    tier: int
    name: str
    action: str
    recommendation: str


# ----- Reference tables -----

class StateAuctionInfoOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    abbr: str
    name: str
    sale_type: str = Field(..., alias="type")
    interest_rate: str
    redemption_period: str
    notes: str


class CountyOut(_FromAttrs):
    name: str
    state: str
    tier: int
    pop: int
    income: int
    zhvi: int
    growth: float
    dom: int
    notes: str


# ----- Census -----

class CensusCountyOut(_FromAttrs):
    name: str
    state: str
    fips: str
    population: int
    median_income: int
    median_home_value: int
    total_housing_units: int
    vacant_units: int
    tier: int


class CensusCountiesResponse(BaseModel):
    updated: str
    source: str
    total_counties: int = Field(..., ge=0)
    data: list[CensusCountyOut]


# ----- Foreclosures -----

class ForeclosureSummaryOut(_FromAttrs):
    state: str
    state_name: str
    total_listings: int
    avg_price: float
    hud_count: int
    fannie_count: int
    freddie_count: int
    foreclosure_rate: float
    yoy_change: float
    avg_days_on_market: int
    updated: str


class ForeclosurePropertyOut(_FromAttrs):
    address: str
    city: str
    state: str
    zip: str
    price: float
    bedrooms: int
    bathrooms: float
    sqft: int
    property_type: str
    source: str
    listing_date: str
    status: str


class ForeclosureStatsResponse(BaseModel):
    updated: str
    source: str
    states: dict[str, ForeclosureSummaryOut]


class StateForeclosuresResponse(BaseModel):
    state: str
    updated: str
    source: str
    properties: list[ForeclosurePropertyOut]


class NationalTrendsOut(_FromAttrs):
    total_foreclosures: int
    total_states: int
    avg_foreclosure_rate: float
    top_state: str
    top_state_count: int
    total_hud: int
    total_fannie: int
    total_freddie: int
    month: str
    year: int


# ----- Auctions -----

class AuctionListingOut(_FromAttrs):
    id: str
    state: str
    county: str
    sale_type: str
    sale_date: str
    property_count: int
    deposit_required: float
    registration_deadline: str
    platform: str
    platform_url: str
    auction_type: str
    notes: str


class AuctionPlatformOut(_FromAttrs):
    name: str
    url: str
    states_covered: list[str]
    auction_types: list[str]
    registration_required: bool
    deposit_info: str


class AuctionsResponse(BaseModel):
    updated: str
    total: int
    auctions: list[AuctionListingOut]


class PlatformsResponse(BaseModel):
    platforms: list[AuctionPlatformOut]


# ----- Market data -----

class ZhviRecordOut(_FromAttrs):
    region_name: str
    state: str
    state_fips: str
    county_fips: str
    zhvi: float
    zhvi_change_yoy: float


class ZhviResponse(BaseModel):
    updated: str
    source: str
    record_count: int
    data: list[ZhviRecordOut]


class RedfinRecordOut(_FromAttrs):
    region: str
    region_type: str
    median_dom: float
    sale_to_list: float
    inventory: int
    price_drop_pct: float
    homes_sold: int


class RedfinResponse(BaseModel):
    updated: str
    source: str
    record_count: int
    data: list[RedfinRecordOut]


class RatesResponse(BaseModel):
    updated: str
    source: str
    mortgage_30yr: float
    mortgage_15yr: float
    mortgage_30yr_change: float
    unemployment_rate: float
    fed_funds: float
    treasury_10yr: float


class MortgageRatesOut(BaseModel):
    rate_30yr: float
    rate_15yr: float
    rate_5yr_arm: float
    change_30yr: float
    change_15yr: float
    updated: str
    source: str


class EconomicIndicatorOut(BaseModel):
    name: str
    value: float
    unit: str
    change: float
    trend: str
    updated: str


class HousingStatsOut(_FromAttrs):
    median_home_price: float
    yoy_change: float
    inventory_months: float
    days_on_market: int


class MarketDataResponse(BaseModel):
    mortgage_rates: MortgageRatesOut
    indicators: list[EconomicIndicatorOut]
    housing_stats: HousingStatsOut
    timestamp: str
