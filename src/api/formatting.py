"""Display formatting for calculation results (id-ID conventions)."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from config.settings import settings
from src.calculators.pph21 import CalculationResult

# id-ID swaps the separators: 1.234.567,89
_ID_SEPARATORS = str.maketrans({",": ".", ".": ","})


def format_rupiah(amount: Decimal) -> str:
    """Format an amount as Rupiah, e.g. ``Rp 10.000.000,00``."""
    decimals = settings.currency_decimals
    rounded = abs(amount).quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)
    text = f"{rounded:,.{decimals}f}".translate(_ID_SEPARATORS)
    sign = "-" if amount < 0 and rounded else ""
    return f"{sign}{settings.currency_symbol} {text}"


def format_rate(rate: Decimal) -> str:
    """Format a fractional rate as a percentage, e.g. ``2,25%``."""
    percent = (rate * 100).normalize()
    text = f"{percent:f}" if percent == percent.to_integral_value() else f"{percent:.2f}"
    return f"{text.translate(_ID_SEPARATORS)}%"


def build_template_context(
    salary: Decimal,
    bonus: Decimal,
    result: CalculationResult,
) -> dict[str, Any]:
    """Flatten a result into display strings keyed by template field name."""
    employer = result.employer_contribution
    employee = result.employee_contribution
    return {
        "status": result.status.value,
        "salary": format_rupiah(salary),
        "bonus": format_rupiah(bonus),
        "tax_rate_category": result.tax_rate_category.value,
        "employer_jkk": format_rupiah(employer.jkk),
        "employer_jkm": format_rupiah(employer.jkm),
        "employer_bpjskes": format_rupiah(employer.bpjskes),
        "employee_jht": format_rupiah(employee.jht),
        "employee_jp": format_rupiah(employee.jp),
        "occupational_expense": format_rupiah(result.occupational_expense),
        "gross_monthly_income": format_rupiah(result.gross_monthly_income),
        "net_monthly_income": format_rupiah(result.net_monthly_income),
        "net_yearly_income": format_rupiah(result.net_yearly_income),
        "non_taxable_income": format_rupiah(result.non_taxable_income),
        "taxable_income": format_rupiah(result.taxable_income),
        "regular_month_tax_rate": format_rate(result.regular_month_tax_rate),
        "regular_month_tax": format_rupiah(result.regular_month_tax),
        "bonus_month_tax_rate": format_rate(result.bonus_month_tax_rate),
        "bonus_month_tax": format_rupiah(result.bonus_month_tax),
        "december_month_tax": format_rupiah(result.december_month_tax),
        "total_tax": format_rupiah(result.total_tax),
        "regular_month_take_home_pay": format_rupiah(result.regular_month_take_home_pay),
        "bonus_month_take_home_pay": format_rupiah(result.bonus_month_take_home_pay),
        "december_take_home_pay": format_rupiah(result.december_take_home_pay),
        "bracket_breakdown": [
            {
                "rate": format_rate(row.rate),
                "taxable_amount": format_rupiah(row.taxable_amount),
                "tax": format_rupiah(row.tax),
            }
            for row in result.bracket_breakdown
        ],
    }
