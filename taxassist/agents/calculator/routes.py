"""
Calculator HTTP routes — POST /api/calculate,
                         POST /api/calculate/compare

Both are pure computations: no persistence, no provider calls.
Malformed numbers (strings, negatives, NaN) are rejected by the Pydantic
schemas and surface as the standard 422 VALIDATION_ERROR envelope.
"""
from __future__ import annotations

import logging

from fastapi import APIRouter

from taxassist.agents.calculator.formatting import format_tax_result
from taxassist.agents.calculator.schemas import (
    CalculateResponse,
    CompareRequest,
    RegimeComparison,
    TaxQuery,
)
from taxassist.agents.calculator.tax_engine import compare_regimes, compute_tax

router = APIRouter(prefix="/api", tags=["calculator"])
logger = logging.getLogger(__name__)


@router.post("/calculate", response_model=CalculateResponse)
async def calculate(query: TaxQuery) -> CalculateResponse:
    """
    Compute tax for one regime and return the breakdown plus the chat summary
    message the UI appends to the transcript.
    """
    result = compute_tax(query)
    logger.info("Tax calculated regime=%s slab=%s", result.regime.value, result.slab)
    return CalculateResponse(**result.model_dump(), summary=format_tax_result(result))


@router.post("/calculate/compare", response_model=RegimeComparison)
async def compare(body: CompareRequest) -> RegimeComparison:
    """Compute both regimes side by side and recommend the cheaper one."""
    comparison = compare_regimes(body.annual_income, body.deductions)
    logger.info("Regime comparison recommended=%s", comparison.recommended_regime.value)
    return comparison
