"""
formatting.py — Rupee formatting and the calculator's chat summary message.

Amounts use the Indian numbering system (lakh/crore grouping):
    1234567.5 → "12,34,567.5"
Up to two fraction digits are kept; trailing zeros are dropped.
"""
from __future__ import annotations

from taxassist.agents.calculator.schemas import Regime, TaxResult


def format_inr(amount: float) -> str:
    """Format a number with Indian digit grouping (no currency symbol)."""
    text = f"{abs(amount):.2f}".rstrip("0").rstrip(".")
    sign = "-" if amount < 0 and text != "0" else ""
    whole, _, fraction = text.partition(".")

    if len(whole) > 3:
        head, tail = whole[:-3], whole[-3:]
        groups: list[str] = []
        while len(head) > 2:
            groups.insert(0, head[-2:])
            head = head[:-2]
        if head:
            groups.insert(0, head)
        whole = ",".join(groups + [tail])

    return f"{sign}{whole}.{fraction}" if fraction else f"{sign}{whole}"


def format_tax_result(result: TaxResult) -> str:
    """
    Build the chat message posted after a calculation.
    The deductions line only appears for the old regime with deductions > 0.
    """
    lines = [
        f"Based on your income of ₹{format_inr(result.annual_income)} "
        f"under the {result.regime.value} tax regime:",
        "",
        f"💰 Taxable Income: ₹{format_inr(result.taxable_income)}",
        f"📊 Tax Slab: {result.slab}",
        f"💸 Income Tax: ₹{format_inr(result.base_tax)}",
        f"🏥 Health & Education Cess (4%): ₹{format_inr(result.cess)}",
        f"💯 Total Tax Liability: ₹{format_inr(result.total_tax)}",
    ]
    if result.regime == Regime.old and result.deductions_applied > 0:
        lines += ["", f"💳 Deductions Applied: ₹{format_inr(result.deductions_applied)}"]
    lines += [
        "",
        "Would you like me to explain any deductions you can claim "
        "or compare with the other tax regime?",
    ]
    return "\n".join(lines)
