"""
Shared test fixtures: test client and common driver selections.
"""

import pytest
from fastapi.testclient import TestClient

from backend.main import app


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def high_reliability_selections():
    """RELY and CPLX both rated high (1.15 each), everything else unselected."""
    return {"RELY": 1.15, "CPLX": 1.15}
