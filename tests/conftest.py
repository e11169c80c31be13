"""Shared test fixtures."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.api.routes import router


@pytest.fixture
def app() -> FastAPI:
    """Create a test app with the router but no lifespan."""
    test_app = FastAPI()
    test_app.include_router(router)
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


@pytest.fixture
def valid_form() -> dict[str, str]:
    """Form submission for TK/0 with a 10,000,000 salary and no bonus."""
    return {"status": "TK/0", "salary": "10000000", "bonus": "0"}
