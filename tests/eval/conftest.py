"""Fixtures for the end-to-end calculation scenarios."""

from pathlib import Path
from typing import Any

import pytest
import yaml

EVAL_DIR = Path(__file__).parent


@pytest.fixture(scope="session")
def calculation_scenarios() -> list[dict[str, Any]]:
    """Load hand-verified calculation scenarios from YAML."""
    path = EVAL_DIR / "test_scenarios.yaml"
    data = yaml.safe_load(path.read_text())
    return data["scenarios"]
