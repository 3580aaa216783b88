# app/domain/types.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Action(str, Enum):
    pursue = "PURSUE"
    caution = "CAUTION"
    avoid = "AVOID"


@dataclass(frozen=True)
class MetricInput:
    population: int
    median_income: int
    growth_yoy: float
    days_on_market: int
    transaction_volume: int
    employment_rate: float


@dataclass(frozen=True)
class TierProfile:
    tier: int
    label: str
    action: Action
    recommendation: str


@dataclass(frozen=True)
class ScoreResult:
    score: float
    tier: int
    label: str
    action: str
    recommendation: str
