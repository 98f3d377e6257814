"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient

from atlantique_loans.api.main import create_app


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client with a fresh application (and cache)"""
    app = create_app()
    return TestClient(app)


@pytest.fixture
def sample_terms() -> dict:
    """Reference loan from the loan calculator's default values"""
    return {"principal": 10000, "annual_rate_percent": 5.5, "term_months": 24}
