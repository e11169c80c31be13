"""Yearly progressive income tax: bracket-by-bracket breakdown."""

from decimal import Decimal
from typing import NamedTuple

from src.calculators.tax_data import TAX_BRACKETS


class BracketTax(NamedTuple):
    """Tax charged within one progressive bracket."""

    lower: Decimal
    upper: Decimal | None
    rate: Decimal
    taxable_amount: Decimal
    tax: Decimal


def calculate_bracket_breakdown(taxable_income: Decimal) -> list[BracketTax]:
    """Split yearly taxable income (already net of PTKP) across the brackets.

    Each bracket only taxes the part of the income that falls inside it.
    Brackets the income never reaches are left out.

    Args:
        taxable_income: Yearly taxable income (must be >= 0).

    Returns:
        One BracketTax per bracket touched, lowest first.
    """
    breakdown: list[BracketTax] = []

    for bracket in TAX_BRACKETS:
        if taxable_income <= bracket.lower:
            break

        upper = bracket.upper if bracket.upper is not None else taxable_income
        taxable = min(taxable_income, upper) - bracket.lower
        breakdown.append(
            BracketTax(
                lower=bracket.lower,
                upper=bracket.upper,
                rate=bracket.rate,
                taxable_amount=taxable,
                tax=taxable * bracket.rate,
            )
        )

    return breakdown


def calculate_yearly_tax(taxable_income: Decimal) -> Decimal:
    """Total yearly PPh21 on taxable income under the progressive brackets."""
    return sum(
        (row.tax for row in calculate_bracket_breakdown(taxable_income)),
        Decimal("0"),
    )
