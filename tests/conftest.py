# tests/conftest.py
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.main import app

# --------------------------------------------------------------------
# FastAPI test client available as fixture `client`
# --------------------------------------------------------------------
@pytest.fixture(scope="session")
def client() -> TestClient:
    return TestClient(app)

# --------------------------------------------------------------------
# Sample messages
# --------------------------------------------------------------------
@pytest.fixture
def clean_message() -> str:
    return "Could you please review this when convenient? Thank you."

@pytest.fixture
def blocked_message() -> str:
    return "you need to fix this shit"

@pytest.fixture
def aggressive_message() -> str:
    return "You always miss deadlines, fix this now"

@pytest.fixture
def urgent_message() -> str:
    return "URGENT: we need the report ASAP, send it immediately and rush the review"
