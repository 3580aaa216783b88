# app/domain/scoring.py
from __future__ import annotations

import math

from .types import Action, MetricInput, ScoreResult, TierProfile

# --- Market score weights (sum to 100) ---
W_POPULATION = 15.0
W_INCOME = 15.0
W_GROWTH = 20.0
W_DOM = 20.0
W_VOLUME = 15.0
W_EMPLOYMENT = 15.0

POPULATION_TARGET = 500_000.0
INCOME_TARGET = 80_000.0
GROWTH_TARGET_PCT = 5.0
DOM_FAST = 30.0
DOM_SLOW = 90.0
VOLUME_TARGET = 10_000.0
EMPLOYMENT_FLOOR_PCT = 90.0
EMPLOYMENT_SPAN_PCT = 6.0

# (min score, profile), checked top-down; first match wins
TIER_TABLE: tuple[tuple[float, TierProfile], ...] = (
    (85.0, TierProfile(1, "Prime Investor", Action.pursue, "Exceptional liquidity and growth fundamentals.")),
    (70.0, TierProfile(2, "Strong/Selective", Action.pursue, "Solid market; focus on specific neighborhood due diligence.")),
    (50.0, TierProfile(3, "Opportunistic", Action.pursue, "Stable regional hub; steady cash flow potential.")),
    (30.0, TierProfile(4, "Speculative", Action.caution, "Limited liquidity; higher exit risk.")),
)
FLOOR_TIER = TierProfile(5, "Capital Trap", Action.avoid, "Weak fundamentals; significant risk of illiquidity.")

TIER_PROFILES: dict[int, TierProfile] = {p.tier: p for _, p in TIER_TABLE}
TIER_PROFILES[FLOOR_TIER.tier] = FLOOR_TIER


def _nan_to_zero(x: float) -> float:
    return 0.0 if math.isnan(x) else x


def _as_float(x: float) -> float:
    """float(x); ints beyond float range saturate to +/-inf."""
    try:
        return float(x)
    except OverflowError:
        return math.inf if x > 0 else -math.inf


def capped(value: float, target: float) -> float:
    """
    min(value / target, 1.0). No lower bound: negative inputs stay negative.
    NaN => 0.0 (no contribution). Ints too large for a float saturate to +/-1.0.
    """
    try:
        ratio = value / target
    except OverflowError:
        return 1.0 if value > 0 else -1.0
    return _nan_to_zero(min(ratio, 1.0))


def clamp01(x: float) -> float:
    if math.isnan(x):
        return 0.0
    return max(0.0, min(1.0, x))


def dom_factor(days_on_market: float) -> float:
    """Inverse: fast markets (< 30 days) saturate, slow ones (> 90) score 0."""
    if days_on_market < DOM_FAST:
        return 1.0
    if days_on_market > DOM_SLOW:
        return 0.0
    return _nan_to_zero((DOM_SLOW - days_on_market) / (DOM_SLOW - DOM_FAST))


def factor_contributions(m: MetricInput) -> dict[str, float]:
    """Weighted per-factor points, in the order they are summed."""
    return {
        "population": capped(m.population, POPULATION_TARGET) * W_POPULATION,
        "median_income": capped(m.median_income, INCOME_TARGET) * W_INCOME,
        "growth_yoy": clamp01(_as_float(m.growth_yoy) / GROWTH_TARGET_PCT) * W_GROWTH,
        "days_on_market": dom_factor(m.days_on_market) * W_DOM,
        "transaction_volume": capped(m.transaction_volume, VOLUME_TARGET) * W_VOLUME,
        "employment_rate": clamp01((_as_float(m.employment_rate) - EMPLOYMENT_FLOOR_PCT) / EMPLOYMENT_SPAN_PCT) * W_EMPLOYMENT,
    }


def tier_profile(score_value: float) -> TierProfile:
    # NaN fails every >= and lands on the floor tier
    for threshold, profile in TIER_TABLE:
        if score_value >= threshold:
            return profile
    return FLOOR_TIER


def score(m: MetricInput) -> ScoreResult:
    total = 0.0
    for pts in factor_contributions(m).values():
        total += pts

    p = tier_profile(total)
    return ScoreResult(
        score=total,
        tier=p.tier,
        label=p.label,
        action=p.action.value,
        recommendation=p.recommendation,
    )


# --- Demographic (census) tier ---
# Same normalize -> weight -> sum -> threshold shape, coarser inputs.
# The summed score is truncated to an int before thresholding.

DEMO_W_POPULATION = 25.0
DEMO_W_INCOME = 25.0
DEMO_W_HOME_VALUE = 50.0
HOME_VALUE_TARGET = 400_000.0

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def _truncate_score(x: float) -> int:
    """Saturating cast toward zero; NaN => 0."""
    if math.isnan(x):
        return 0
    if x == math.inf:
        return _I32_MAX
    if x == -math.inf:
        return _I32_MIN
    return max(_I32_MIN, min(_I32_MAX, math.trunc(x)))


def demographic_score(population: float, income: float, home_value: float) -> float:
    total = 0.0
    total += capped(population, POPULATION_TARGET) * DEMO_W_POPULATION
    total += capped(income, INCOME_TARGET) * DEMO_W_INCOME
    total += capped(home_value, HOME_VALUE_TARGET) * DEMO_W_HOME_VALUE
    return total


def demographic_tier(population: float, income: float, home_value: float) -> int:
    s = _truncate_score(demographic_score(population, income, home_value))
    if 80 <= s <= 100:
        return 1
    if 60 <= s <= 79:
        return 2
    if 40 <= s <= 59:
        return 3
    if 20 <= s <= 39:
        return 4
    return 5
