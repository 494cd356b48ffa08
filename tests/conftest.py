import pytest

from unistore import get_settings


@pytest.fixture(autouse=True)
def development_settings(monkeypatch):
    monkeypatch.delenv("UNISTORE_ENVIRONMENT", raising=False)
    get_settings.cache_clear()

    yield

    get_settings.cache_clear()


@pytest.fixture
def production(monkeypatch):
    monkeypatch.setenv("UNISTORE_ENVIRONMENT", "production")
    get_settings.cache_clear()
