"""Form input parsing for the calculator page."""

from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from typing import Any, NamedTuple

from src.calculators.tax_data import TaxpayerStatus


class CalculationInputError(ValueError):
    """Raised when a submitted form value cannot be used for a calculation."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class InvalidStatusError(CalculationInputError):
    """Status code is not one of the eight TK/K codes."""


class InvalidAmountError(CalculationInputError):
    """Salary or bonus is not a non-negative number."""


# Upper bound for salary and bonus: one quadrillion rupiah.
MAX_AMOUNT = Decimal("1000000000000000")


class CalculationInput(NamedTuple):
    salary: Decimal
    bonus: Decimal
    status: TaxpayerStatus


def parse_taxpayer_status(value: Any) -> TaxpayerStatus:
    """Parse a status code such as "TK/0" or "K/3"."""
    try:
        return TaxpayerStatus(value)
    except ValueError:
        raise InvalidStatusError("status", f"Unknown taxpayer status: {value!r}") from None


def parse_amount(value: Any, field: str) -> Decimal:
    """Parse a non-negative, finite money amount from a form string.

    Raises:
        InvalidAmountError: if the value is missing, blank, not a number,
            NaN, infinite, negative or above MAX_AMOUNT.
    """
    if value is None:
        raise InvalidAmountError(field, f"Missing {field}")

    text = str(value).strip()
    if not text:
        raise InvalidAmountError(field, f"Missing {field}")

    try:
        amount = Decimal(text)
    except InvalidOperation:
        raise InvalidAmountError(field, f"Invalid {field}: {text!r}") from None

    if not amount.is_finite() or amount < 0 or amount > MAX_AMOUNT:
        raise InvalidAmountError(field, f"Invalid {field}: {text!r}")
    return amount


def parse_calculation_form(form: Mapping[str, Any]) -> CalculationInput:
    """Validate the status, salary and bonus fields of a submitted form."""
    return CalculationInput(
        salary=parse_amount(form.get("salary"), "salary"),
        bonus=parse_amount(form.get("bonus"), "bonus"),
        status=parse_taxpayer_status(form.get("status")),
    )
