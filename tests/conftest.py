"""Shared fixtures for the calculator test suite."""

import os
import sys

import pytest

# Add project root to sys.path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from core.config import STRICT_ENV_VAR  # noqa: E402
from core.models import CalculatorState  # noqa: E402
from services.calculator_service import CalculatorService  # noqa: E402


@pytest.fixture(autouse=True)
def no_strict_env(monkeypatch):
    """Keeps a developer's ROMAN_CALC_STRICT setting out of the tests."""
    monkeypatch.delenv(STRICT_ENV_VAR, raising=False)


@pytest.fixture
def service() -> CalculatorService:
    return CalculatorService()


@pytest.fixture
def strict_service() -> CalculatorService:
    return CalculatorService(strict=True)


@pytest.fixture
def state() -> CalculatorState:
    return CalculatorState()
