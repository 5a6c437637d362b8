# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Environment defaults must be set before cui_api.core.config is imported,
# since Config reads os.environ at class definition time.
# =============================================================================

import os

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("CORS_ALLOWED_ORIGINS", "http://localhost:3000")

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def client():
    """Create test client for the FastAPI app."""
    from cui_api.app import app

    return TestClient(app)
