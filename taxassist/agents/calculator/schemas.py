"""
schemas.py — Calculator Pydantic v2 data contracts.

Defines:
  - Regime             enum (new / old)
  - TaxQuery           (one calculation request — deductions only count under old)
  - TaxResult          (derived breakdown for one regime — immutable)
  - CompareRequest     (income + deductions, both regimes computed)
  - RegimeComparison   (side-by-side results + recommendation)
  - CalculateResponse  (TaxResult + chat summary text, HTTP shape)

All monetary fields are in INR (Indian Rupees), annual.
NaN / infinity are rejected at the boundary (allow_inf_nan=False) — the tax
engine itself performs no validation and assumes well-formed numbers.
"""
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Regime(str, Enum):
    new = "new"
    old = "old"


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------

class TaxQuery(BaseModel):
    """
    A single tax calculation request.

    deductions is accepted for both regimes but only subtracted when regime=old.
    extra='forbid' ensures unknown fields from client requests cause a 422 error.
    """
    model_config = ConfigDict(extra="forbid")

    annual_income: float = Field(
        ..., ge=0, allow_inf_nan=False,
        description="Gross annual income in INR.",
    )
    regime: Regime = Field(
        default=Regime.new,
        description="Tax regime: 'new' (no deductions) or 'old' (with deductions).",
    )
    deductions: float = Field(
        default=0, ge=0, allow_inf_nan=False,
        description="Total deductions in INR. Ignored under the new regime.",
    )


class CompareRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    annual_income: float = Field(..., ge=0, allow_inf_nan=False)
    deductions: float = Field(default=0, ge=0, allow_inf_nan=False)


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

class TaxResult(BaseModel):
    """
    Tax breakdown for one regime.

    Computation sequence:
      1. taxable_income = annual_income - deductions_applied   (not clamped at 0)
      2. base_tax = progressive marginal slab tax              (rounded to paise)
      3. cess = 4% of base_tax                                 (rounded to paise)
      4. total_tax = base_tax + cess
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    annual_income: float
    regime: Regime
    deductions_applied: float    # 0 under the new regime
    taxable_income: float
    slab: str                    # Label of the bracket containing taxable_income
    base_tax: float
    cess: float
    total_tax: float


class RegimeComparison(BaseModel):
    """Both regimes for the same income. Ties recommend the new regime."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    new_regime: TaxResult
    old_regime: TaxResult
    recommended_regime: Regime
    savings_amount: float        # abs(old_tax - new_tax)


class CalculateResponse(TaxResult):
    summary: str                 # Chat-ready message, Indian digit grouping


__all__ = [
    "Regime",
    "TaxQuery",
    "CompareRequest",
    "TaxResult",
    "RegimeComparison",
    "CalculateResponse",
]
