import pytest
from fastapi.testclient import TestClient

from splitter_service.config.settings import get_settings
from splitter_service.main import app
from splitter_service.services.splitting.base import Document


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Run every test against default settings, regardless of the caller's environment."""
    monkeypatch.delenv("DEFAULT_PROFILE", raising=False)
    monkeypatch.delenv("MAX_DOCUMENTS_PER_REQUEST", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("DEBUG", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def client() -> TestClient:
    """Fixture for a TestClient on the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def sample_doc() -> Document:
    """The mixed-separator document used across splitter tests."""
    return Document(content="1a23a45a67890c1a234b5678a90")
