"""Pytest configuration and fixtures."""

import pytest
import structlog
from fastapi.testclient import TestClient

from swapcalc.amm import ReservePool, SwapEngine
from swapcalc.api.main import app


@pytest.fixture
def engine() -> SwapEngine:
    """Engine at the default 0.3% fee."""
    return SwapEngine()


@pytest.fixture
def balanced_pool() -> ReservePool:
    """ETH/USDC pool with 1000 of each."""
    return ReservePool("ETH", 1000.0, "USDC", 1000.0)


@pytest.fixture
def client():
    """Create a test client for the API."""
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo logging configuration done by the CLI or server entry points."""
    yield
    structlog.reset_defaults()
