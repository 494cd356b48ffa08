import pytest

from unistore import Settings, get_settings


def test_defaults_to_development() -> None:
    settings = get_settings()

    assert settings.environment == "development"
    assert not settings.is_production


@pytest.mark.parametrize("value", ["production", "Production", " PRODUCTION "])
def test_reads_environment_from_env(monkeypatch, value) -> None:
    monkeypatch.setenv("UNISTORE_ENVIRONMENT", value)

    assert Settings().is_production


@pytest.mark.usefixtures("production")
def test_production_fixture_switches_settings() -> None:
    assert get_settings().is_production


def test_settings_are_cached() -> None:
    assert get_settings() is get_settings()
