"""TER (monthly effective rate) lookup by taxpayer status and income."""

from decimal import Decimal

from src.calculators.tax_data import (
    NON_TAXABLE_INCOME,
    TAX_RATE_CATEGORIES,
    TER_RATES,
    TaxpayerStatus,
    TaxRateCategory,
)


def get_tax_rate_category(status: TaxpayerStatus) -> TaxRateCategory:
    """Map a taxpayer status to its TER category (A, B or C)."""
    return TAX_RATE_CATEGORIES[status]


def get_non_taxable_income(status: TaxpayerStatus) -> Decimal:
    """Yearly PTKP for a taxpayer status."""
    return NON_TAXABLE_INCOME[status]


def get_ter_rate(category: TaxRateCategory, income: Decimal) -> Decimal:
    """Resolve the monthly withholding rate for an income level.

    Scans the category's table from the highest threshold down and returns
    the rate of the first entry whose threshold does not exceed the income.
    The (0, 0) floor entry always matches non-negative income.

    Args:
        category: TER category of the taxpayer.
        income: Monthly income the rate applies to.

    Returns:
        The rate as a fraction, e.g. Decimal("0.0225").
    """
    for entry in TER_RATES[category]:
        if entry.threshold <= income:
            return entry.rate
    return Decimal("0")
