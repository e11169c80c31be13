"""API routes for the PPh21 calculator."""

import logging
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import Any

from fastapi import APIRouter, Request, Response
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel, Field

from src.api.forms import MAX_AMOUNT, CalculationInputError, parse_calculation_form
from src.api.formatting import build_template_context
from src.calculators.pph21 import calculate_tax
from src.calculators.tax_data import TaxpayerStatus

logger = logging.getLogger(__name__)

router = APIRouter()

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

STATUSES = [status.value for status in TaxpayerStatus]


class CalculateRequest(BaseModel):
    """Request body for the /api/calculate endpoint."""

    salary: Decimal = Field(ge=0, le=MAX_AMOUNT)
    bonus: Decimal = Field(default=Decimal("0"), ge=0, le=MAX_AMOUNT)
    status: TaxpayerStatus


def _to_json(value: Any) -> Any:
    """Convert a calculation result into JSON-friendly primitives."""
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, Enum):
        return value.value
    if hasattr(value, "_asdict"):
        return {key: _to_json(item) for key, item in value._asdict().items()}
    if isinstance(value, tuple | list):
        return [_to_json(item) for item in value]
    return value


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def index(request: Request) -> Response:
    """Render the empty calculator form."""
    return templates.TemplateResponse(
        request,
        "index.html",
        {"statuses": STATUSES, "form": {"salary": "", "bonus": "0"}, "result": None},
    )


@router.post("/", response_class=HTMLResponse, include_in_schema=False)
async def calculate_form(request: Request) -> Response:
    """Calculate PPh21 from a form submission and render the breakdown."""
    form = await request.form()
    try:
        data = parse_calculation_form(form)
    except CalculationInputError as e:
        logger.warning("Rejected calculator input field=%s: %s", e.field, e)
        return Response(status_code=400)

    result = calculate_tax(data.salary, data.bonus, data.status)
    logger.info(
        "Calculated PPh21 status=%s category=%s",
        result.status.value,
        result.tax_rate_category.value,
    )
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "statuses": STATUSES,
            "form": {"salary": str(form["salary"]).strip(), "bonus": str(form["bonus"]).strip()},
            "result": build_template_context(data.salary, data.bonus, result),
        },
    )


@router.post("/api/calculate")
async def calculate_json(body: CalculateRequest) -> dict[str, Any]:
    """Calculate PPh21 and return the full breakdown as JSON."""
    result = calculate_tax(body.salary, body.bonus, body.status)
    logger.info(
        "Calculated PPh21 status=%s category=%s",
        result.status.value,
        result.tax_rate_category.value,
    )
    return _to_json(result)


@router.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}
