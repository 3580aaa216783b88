# app/entrypoints/api/routers/analyze.py
from __future__ import annotations

import logging

from fastapi import APIRouter

from ....domain.scoring import score
from ....domain.types import MetricInput
from ....schemas import AnalysisIn, AnalysisOut

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["analyze"])


@router.post("/analyze", response_model=AnalysisOut)
def analyze(body: AnalysisIn) -> AnalysisOut:
    result = score(MetricInput(**body.model_dump()))
    log.debug("analyze: score=%.2f tier=%d", result.score, result.tier)
    return AnalysisOut(
        score=result.score,
        tier=result.tier,
        name=result.label,
        action=result.action,
        recommendation=result.recommendation,
    )
