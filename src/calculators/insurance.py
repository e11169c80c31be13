"""BPJS contribution calculator: employer and employee sides."""

from decimal import Decimal
from typing import NamedTuple

from src.calculators.tax_data import (
    BPJS_KESEHATAN_EMPLOYER_RATE,
    BPJS_KESEHATAN_MAX_SALARY,
    JHT_EMPLOYEE_RATE,
    JKK_RATE,
    JKM_RATE,
    JP_EMPLOYEE_RATE,
    JP_MAX_SALARY,
)


class EmployerContribution(NamedTuple):
    """Monthly contributions paid by the employer, added to gross income."""

    jkk: Decimal
    jkm: Decimal
    bpjskes: Decimal

    @property
    def total(self) -> Decimal:
        return self.jkk + self.jkm + self.bpjskes


class EmployeeContribution(NamedTuple):
    """Monthly contributions withheld from the employee, deducted from net income."""

    jht: Decimal
    jp: Decimal

    @property
    def total(self) -> Decimal:
        return self.jht + self.jp


def calculate_employer_contribution(salary: Decimal) -> EmployerContribution:
    """Calculate employer-paid JKK, JKM and BPJS Kesehatan.

    BPJS Kesehatan is charged on salary up to a maximum contribution base.
    """
    return EmployerContribution(
        jkk=salary * JKK_RATE,
        jkm=salary * JKM_RATE,
        bpjskes=min(salary, BPJS_KESEHATAN_MAX_SALARY) * BPJS_KESEHATAN_EMPLOYER_RATE,
    )


def calculate_employee_contribution(salary: Decimal) -> EmployeeContribution:
    """Calculate employee-paid JHT and JP.

    JP is charged on salary up to a maximum contribution base.
    """
    return EmployeeContribution(
        jht=salary * JHT_EMPLOYEE_RATE,
        jp=min(salary, JP_MAX_SALARY) * JP_EMPLOYEE_RATE,
    )
