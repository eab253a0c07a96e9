"""Pytest configuration and fixtures."""

import pytest

from catalogue_logging import configure_logging
from catalogue_settings import reset_settings
from chain_of_responsibility_pattern import build_chain
from flyweight_pattern import TreeTypeFactory
from singleton_pattern import AppRegistry


@pytest.fixture(autouse=True)
def clean_state(monkeypatch):
    """Fresh settings, quiet logging and no leftover shared instances per test."""
    for var in ("CATALOGUE_DENOMINATIONS", "CATALOGUE_LOG_LEVEL", "CATALOGUE_LOG_FORMAT"):
        monkeypatch.delenv(var, raising=False)
    configure_logging(level="WARNING")
    # configure_logging caches settings; drop them so tests can set CATALOGUE_* first
    reset_settings()
    AppRegistry.reset()
    TreeTypeFactory.clear()
    yield
    reset_settings()
    AppRegistry.reset()
    TreeTypeFactory.clear()


@pytest.fixture
def chain():
    """Default 2000/500/200/100 chain."""
    return build_chain()
