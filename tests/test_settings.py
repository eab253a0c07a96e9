"""Tests for environment-driven settings."""

from catalogue_logging import configure_logging
from catalogue_settings import Settings, get_settings, reset_settings


def test_defaults():
    settings = Settings()
    assert settings.denominations == [2000, 500, 200, 100]
    assert settings.log_level == "WARNING"


def test_denominations_from_environment_are_sorted(monkeypatch):
    monkeypatch.setenv("CATALOGUE_DENOMINATIONS", "[10, 50, 20]")
    assert get_settings().denominations == [50, 20, 10]


def test_cached_settings_survive_until_reset(monkeypatch):
    configure_logging(level="WARNING")
    monkeypatch.setenv("CATALOGUE_DENOMINATIONS", "[5]")
    assert get_settings().denominations == [2000, 500, 200, 100]
    reset_settings()
    assert get_settings().denominations == [5]
