import pytest
from fastapi.testclient import TestClient

from provider_mocks.main import app


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture(autouse=True)
def _default_suffixes(monkeypatch):
    """Tests assume the stock blocked suffixes unless they override them."""
    monkeypatch.delenv("FINK_BLOCKED_SUFFIX", raising=False)
    monkeypatch.delenv("PEARL_BLOCKED_SUFFIX", raising=False)
