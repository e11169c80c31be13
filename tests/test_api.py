"""Tests for the API endpoints."""

import logging
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from src.api import routes
from src.api.app import create_app
from src.api.routes import TEMPLATES_DIR


def test_index_serves_empty_form(client: TestClient) -> None:
    """GET / renders the form without any result."""
    response = client.get("/")
    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert "PPh21 Calculator" in response.text
    assert 'name="salary"' in response.text
    assert "K/3" in response.text
    assert "Kategori TER" not in response.text


def test_health(client: TestClient) -> None:
    """GET /health returns ok status."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_form_renders_result(client: TestClient, valid_form: dict[str, str]) -> None:
    """POST / renders formatted amounts and the category label."""
    response = client.post("/", data=valid_form)
    assert response.status_code == 200
    assert "Kategori TER" in response.text
    assert "Rp 10.000.000,00" in response.text
    assert "Rp 95.596,00" in response.text
    assert "Rp 9.658.404,00" in response.text
    assert "Rp 3.285.127,20" in response.text
    assert "2%" in response.text


def test_form_keeps_submitted_amounts(client: TestClient) -> None:
    """The rendered form is refilled with the submitted salary and bonus."""
    response = client.post(
        "/", data={"status": "K/1", "salary": " 20000000 ", "bonus": "40000000"}
    )
    assert response.status_code == 200
    assert 'value="20000000"' in response.text
    assert 'value="40000000"' in response.text


def test_form_accepts_maximum_amount(client: TestClient) -> None:
    response = client.post(
        "/", data={"status": "TK/0", "salary": "1000000000000000", "bonus": "0"}
    )
    assert response.status_code == 200
    assert "Rp 1.000.000.000.000.000,00" in response.text


def test_form_renders_negative_december(client: TestClient) -> None:
    response = client.post("/", data={"status": "TK/0", "salary": "0", "bonus": "114000000"})
    assert response.status_code == 200
    assert "-Rp 25.500.000,00" in response.text


def test_form_logs_calculation(
    client: TestClient, valid_form: dict[str, str], caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.INFO, logger="src.api.routes"):
        client.post("/", data=valid_form)
    assert "status=TK/0 category=A" in caplog.text


@pytest.mark.parametrize(
    "overrides",
    [
        {"status": "X/9"},
        {"status": ""},
        {"salary": "abc"},
        {"salary": ""},
        {"bonus": "-1"},
        {"bonus": "NaN"},
        {"salary": "Infinity"},
        {"salary": "1e999999"},
        {"bonus": "1e2000000"},
        {"salary": "1000000000000001"},
    ],
)
def test_form_rejects_invalid_input(
    client: TestClient, valid_form: dict[str, str], overrides: dict[str, str]
) -> None:
    """Bad status or amount returns a bare 400."""
    response = client.post("/", data={**valid_form, **overrides})
    assert response.status_code == 400
    assert response.content == b""


def test_form_missing_field_returns_400(client: TestClient) -> None:
    response = client.post("/", data={"salary": "10000000", "bonus": "0"})
    assert response.status_code == 400


def test_form_rejection_is_logged(
    client: TestClient, valid_form: dict[str, str], caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.WARNING, logger="src.api.routes"):
        client.post("/", data={**valid_form, "status": "X/9"})
    assert "field=status" in caplog.text


def test_json_calculate(client: TestClient) -> None:
    """POST /api/calculate returns the full breakdown as JSON numbers."""
    response = client.post(
        "/api/calculate", json={"salary": 10000000, "bonus": 0, "status": "TK/0"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "TK/0"
    assert data["tax_rate_category"] == "A"
    assert data["employer_contribution"] == {"jkk": 24000.0, "jkm": 30000.0, "bpjskes": 400000.0}
    assert data["employee_contribution"] == {"jht": 200000.0, "jp": 95596.0}
    assert data["taxable_income"] == 61900848.0
    assert data["total_tax"] == pytest.approx(3285127.2)
    assert data["december_month_tax"] == pytest.approx(1160278.32)
    assert len(data["bracket_breakdown"]) == 2
    assert data["bracket_breakdown"][0]["upper"] == 60000000.0


def test_json_bonus_defaults_to_zero(client: TestClient) -> None:
    response = client.post("/api/calculate", json={"salary": 0, "status": "K/3"})
    assert response.status_code == 200
    data = response.json()
    assert data["total_tax"] == 0.0
    assert data["bracket_breakdown"] == []


def test_json_accepts_maximum_amount(client: TestClient) -> None:
    response = client.post(
        "/api/calculate", json={"salary": "1e15", "bonus": "1e15", "status": "TK/0"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["employer_contribution"]["jkk"] == 2.4e12
    assert data["total_tax"] > 0


@pytest.mark.parametrize(
    "body",
    [
        {"salary": 1000, "bonus": 0, "status": "X/9"},
        {"salary": -1, "bonus": 0, "status": "TK/0"},
        {"salary": 1000, "bonus": -5, "status": "TK/0"},
        {"bonus": 0, "status": "TK/0"},
        {"salary": "1e400", "bonus": 0, "status": "TK/0"},
        {"salary": "1e999999", "bonus": 0, "status": "TK/0"},
        {"salary": 1000, "bonus": "1e400", "status": "TK/0"},
    ],
)
def test_json_rejects_invalid_body(client: TestClient, body: dict[str, object]) -> None:
    response = client.post("/api/calculate", json=body)
    assert response.status_code == 422


def test_create_app_runs_lifespan() -> None:
    """The factory app starts, serves and shuts down."""
    with TestClient(create_app()) as client:
        response = client.get("/health")
    assert response.status_code == 200


def test_templates_ship_inside_the_api_package() -> None:
    """The template lives next to the routes module so installs include it."""
    assert TEMPLATES_DIR.parent == Path(routes.__file__).resolve().parent
    assert (TEMPLATES_DIR / "index.html").is_file()
