import pytest
from fastapi.testclient import TestClient

from main import create_app


@pytest.fixture
def client():
    with TestClient(create_app()) as c:
        yield c


@pytest.fixture
def trusted_proxy(monkeypatch):
    from config.settings import settings

    monkeypatch.setattr(settings, "TRUST_FORWARDED_HEADERS", True)
