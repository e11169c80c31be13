"""PPh21 calculator: composites BPJS, TER withholding and yearly reconciliation.

Simulates one January–December cycle for a single employer: ten regular
months withheld at the TER rate, one bonus month withheld at the TER rate on
salary plus bonus, and December settling the difference against the yearly
progressive tax.
"""

from decimal import Decimal
from typing import NamedTuple

from src.calculators.income_tax import BracketTax, calculate_bracket_breakdown
from src.calculators.insurance import (
    EmployeeContribution,
    EmployerContribution,
    calculate_employee_contribution,
    calculate_employer_contribution,
)
from src.calculators.tax_data import (
    MONTHS_PER_YEAR,
    OCCUPATIONAL_EXPENSE_MONTHLY_CAP,
    OCCUPATIONAL_EXPENSE_RATE,
    REGULAR_MONTHS,
    TaxpayerStatus,
    TaxRateCategory,
)
from src.calculators.ter import get_non_taxable_income, get_tax_rate_category, get_ter_rate

ZERO = Decimal("0")


class CalculationResult(NamedTuple):
    """Full PPh21 breakdown for one simulated year."""

    status: TaxpayerStatus
    tax_rate_category: TaxRateCategory
    employer_contribution: EmployerContribution
    employee_contribution: EmployeeContribution
    occupational_expense: Decimal
    gross_monthly_income: Decimal
    net_monthly_income: Decimal
    net_yearly_income: Decimal
    non_taxable_income: Decimal
    taxable_income: Decimal
    regular_month_tax_rate: Decimal
    regular_month_tax: Decimal
    bonus_month_income: Decimal
    bonus_month_tax_rate: Decimal
    bonus_month_tax: Decimal
    december_month_tax: Decimal  # may be negative (over-withholding credit)
    total_tax: Decimal
    bracket_breakdown: tuple[BracketTax, ...]
    regular_month_take_home_pay: Decimal
    bonus_month_take_home_pay: Decimal
    december_take_home_pay: Decimal


def _to_decimal(value: Decimal | int | str | float) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def calculate_tax(
    salary: Decimal,
    bonus: Decimal,
    status: TaxpayerStatus,
) -> CalculationResult:
    """Calculate PPh21 withholding for a January–December simulation.

    Args:
        salary: Gross monthly salary (must be >= 0).
        bonus: One-time bonus paid in the bonus month (must be >= 0).
        status: Taxpayer status, already validated.

    Returns:
        CalculationResult with contributions, income figures and the tax
        withheld in regular months, the bonus month and December.
    """
    salary = _to_decimal(salary)
    bonus = _to_decimal(bonus)
    status = TaxpayerStatus(status)

    category = get_tax_rate_category(status)
    employer = calculate_employer_contribution(salary)
    employee = calculate_employee_contribution(salary)

    gross_monthly_income = salary + employer.total
    occupational_expense = min(
        gross_monthly_income * OCCUPATIONAL_EXPENSE_RATE,
        OCCUPATIONAL_EXPENSE_MONTHLY_CAP,
    )
    net_monthly_income = salary + employer.total - employee.total - occupational_expense
    bonus_month_income = net_monthly_income + bonus
    net_yearly_income = net_monthly_income * MONTHS_PER_YEAR + bonus
    non_taxable_income = get_non_taxable_income(status)
    taxable_income = max(net_yearly_income - non_taxable_income, ZERO)

    regular_month_tax_rate = get_ter_rate(category, net_monthly_income)
    bonus_month_tax_rate = get_ter_rate(category, bonus_month_income)

    if taxable_income == ZERO:
        regular_month_tax = ZERO
        bonus_month_tax = ZERO
        december_month_tax = ZERO
        total_tax = ZERO
        breakdown: tuple[BracketTax, ...] = ()
    else:
        regular_month_tax = net_monthly_income * regular_month_tax_rate
        bonus_month_tax = bonus_month_income * bonus_month_tax_rate

        breakdown = tuple(calculate_bracket_breakdown(taxable_income))
        yearly_tax = sum((row.tax for row in breakdown), ZERO)
        december_month_tax = yearly_tax - regular_month_tax * REGULAR_MONTHS - bonus_month_tax
        total_tax = regular_month_tax * REGULAR_MONTHS + bonus_month_tax + december_month_tax

    return CalculationResult(
        status=status,
        tax_rate_category=category,
        employer_contribution=employer,
        employee_contribution=employee,
        occupational_expense=occupational_expense,
        gross_monthly_income=gross_monthly_income,
        net_monthly_income=net_monthly_income,
        net_yearly_income=net_yearly_income,
        non_taxable_income=non_taxable_income,
        taxable_income=taxable_income,
        regular_month_tax_rate=regular_month_tax_rate,
        regular_month_tax=regular_month_tax,
        bonus_month_income=bonus_month_income,
        bonus_month_tax_rate=bonus_month_tax_rate,
        bonus_month_tax=bonus_month_tax,
        december_month_tax=december_month_tax,
        total_tax=total_tax,
        bracket_breakdown=breakdown,
        regular_month_take_home_pay=salary - employee.total - regular_month_tax,
        bonus_month_take_home_pay=salary + bonus - employee.total - bonus_month_tax,
        december_take_home_pay=salary - employee.total - december_month_tax,
    )
