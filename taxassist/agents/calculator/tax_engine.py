"""
TaxAssist Tax Engine — FY 2023-24 slab schedule.
Pure Python, zero LLM, deterministic. Same input → same output.

No validation happens here: callers must hand in finite, non-negative numbers
(TaxQuery enforces this at the HTTP boundary). Behaviour for NaN is undefined.
"""
from __future__ import annotations

from typing import NamedTuple

from taxassist.agents.calculator.formatting import format_inr
from taxassist.agents.calculator.schemas import (
    Regime, RegimeComparison, TaxQuery, TaxResult,
)

# ===========================================================================
# SLAB TABLES: ordered ascending by upper bound, last bound is infinity
# ===========================================================================


class TaxBracket(NamedTuple):
    upper_bound: float
    rate: float


NEW_REGIME_SLABS: tuple[TaxBracket, ...] = (
    TaxBracket(300_000,      0.00),   # 0–3L: 0%
    TaxBracket(600_000,      0.05),   # 3–6L: 5%
    TaxBracket(900_000,      0.10),   # 6–9L: 10%
    TaxBracket(1_200_000,    0.15),   # 9–12L: 15%
    TaxBracket(1_500_000,    0.20),   # 12–15L: 20%
    TaxBracket(float("inf"), 0.30),   # >15L: 30%
)

OLD_REGIME_SLABS: tuple[TaxBracket, ...] = (
    TaxBracket(250_000,      0.00),   # 0–2.5L: 0%
    TaxBracket(500_000,      0.05),   # 2.5–5L: 5%
    TaxBracket(1_000_000,    0.20),   # 5–10L: 20%
    TaxBracket(float("inf"), 0.30),   # >10L: 30%
)

CESS_RATE = 0.04   # Health & Education Cess on base tax


def validate_regime_table(slabs: tuple[TaxBracket, ...]) -> None:
    """
    Brackets must partition [0, inf): strictly ascending positive bounds,
    rates within [0, 1], last bound infinite.

    Raises:
        ValueError: describing the first broken rule.
    """
    if not slabs:
        raise ValueError("Regime table must contain at least one bracket")
    prev_bound = 0.0
    for bound, rate in slabs:
        if bound <= prev_bound:
            raise ValueError(f"Bracket bound {bound} is not above previous bound {prev_bound}")
        if not 0.0 <= rate <= 1.0:
            raise ValueError(f"Bracket rate {rate} is outside [0, 1]")
        prev_bound = bound
    if slabs[-1].upper_bound != float("inf"):
        raise ValueError("Last bracket must have an infinite upper bound")


REGIME_TABLES: dict[Regime, tuple[TaxBracket, ...]] = {
    Regime.new: NEW_REGIME_SLABS,
    Regime.old: OLD_REGIME_SLABS,
}

for _slabs in REGIME_TABLES.values():
    validate_regime_table(_slabs)


# ===========================================================================
# INTERNAL HELPERS (pure functions: no side effects, no I/O)
# ===========================================================================

def _calculate_slab_tax(taxable_income: float, slabs: tuple[TaxBracket, ...]) -> float:
    """
    Apply progressive slab tax to taxable_income using a bracket-list pattern.
    Accumulates tax on each bracket, stops when taxable_income <= previous ceiling.
    A negative taxable_income stops at the first bracket → 0.
    """
    tax = 0.0
    prev_ceiling = 0.0
    for ceiling, rate in slabs:
        if taxable_income <= prev_ceiling:
            break
        slab_income = min(taxable_income, ceiling) - prev_ceiling
        tax += slab_income * rate
        prev_ceiling = ceiling
    return tax


def _format_rate(rate: float) -> str:
    return f"{round(rate * 100, 2):g}%"


def slab_label(taxable_income: float, slabs: tuple[TaxBracket, ...]) -> str:
    """
    Human-readable label of the bracket containing taxable_income, e.g.
    "0% (Up to ₹3,00,000)", "5% (₹3,00,001 - ₹6,00,000)", "30% (Above ₹15,00,000)".
    """
    prev_ceiling = 0.0
    for index, (ceiling, rate) in enumerate(slabs):
        if taxable_income <= ceiling:
            if index == 0:
                return f"{_format_rate(rate)} (Up to ₹{format_inr(ceiling)})"
            if ceiling == float("inf"):
                return f"{_format_rate(rate)} (Above ₹{format_inr(prev_ceiling)})"
            return (
                f"{_format_rate(rate)} "
                f"(₹{format_inr(prev_ceiling + 1)} - ₹{format_inr(ceiling)})"
            )
        prev_ceiling = ceiling
    # Unreachable for a validated table: the last bound is infinite
    raise ValueError(f"No bracket contains taxable income {taxable_income}")


# ===========================================================================
# PUBLIC API
# ===========================================================================

def compute_tax(query: TaxQuery) -> TaxResult:
    """
    Tax for one regime.

    Deductions are subtracted only under the old regime. taxable_income is NOT
    clamped at zero: when deductions exceed income it is reported negative and
    falls in the lowest (0%) bracket, so tax is never negative.
    Cess: 4% on base tax. base_tax and cess are rounded to paise before summing.
    """
    slabs = REGIME_TABLES[query.regime]
    deductions = query.deductions if query.regime == Regime.old else 0.0
    taxable_income = query.annual_income - deductions

    slab_tax = _calculate_slab_tax(taxable_income, slabs)
    base_tax = round(slab_tax, 2)
    cess = round(slab_tax * CESS_RATE, 2)
    total_tax = round(base_tax + cess, 2)

    return TaxResult(
        annual_income=query.annual_income,
        regime=query.regime,
        deductions_applied=deductions,
        taxable_income=taxable_income,
        slab=slab_label(taxable_income, slabs),
        base_tax=base_tax,
        cess=cess,
        total_tax=total_tax,
    )


def compare_regimes(annual_income: float, deductions: float = 0.0) -> RegimeComparison:
    """
    Compute both regimes for the same income and recommend the lower total.
    Ties go to the new regime (simpler, no investment proofs needed).
    """
    new = compute_tax(TaxQuery(annual_income=annual_income, regime=Regime.new, deductions=deductions))
    old = compute_tax(TaxQuery(annual_income=annual_income, regime=Regime.old, deductions=deductions))

    recommended = Regime.old if old.total_tax < new.total_tax else Regime.new
    savings = abs(new.total_tax - old.total_tax)

    return RegimeComparison(
        new_regime=new,
        old_regime=old,
        recommended_regime=recommended,
        savings_amount=round(savings, 2),
    )
