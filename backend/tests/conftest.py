"""
Pytest configuration and fixtures
"""
import os
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add backend directory to path for imports
backend_dir = Path(__file__).parent.parent
if str(backend_dir) not in sys.path:
    sys.path.insert(0, str(backend_dir))

TEST_API_KEY = "test-secret-key"

# Environment must be in place before settings are first loaded
os.environ["x_api_key"] = TEST_API_KEY
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("LOG_FILE_ENABLED", "false")

from app.core.config import Settings, get_settings  # noqa: E402


@pytest.fixture
def settings() -> Settings:
    """Settings used by the app under test"""
    return Settings(x_api_key=TEST_API_KEY, strict_base64=True)


@pytest.fixture
def app(settings):
    """Application with settings injected"""
    from main import app as application
    application.dependency_overrides[get_settings] = lambda: settings
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """Create test client"""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers():
    """Headers carrying the valid API key"""
    return {"x_api_key": TEST_API_KEY}
