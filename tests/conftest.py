"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import pytest

from cents.core import config as config_module
from cents.core.money import Money


@pytest.fixture
def zero() -> Money:
    return Money()


@pytest.fixture
def one_dollar() -> Money:
    return Money.from_cents(100)


@pytest.fixture
def ten_dollars() -> Money:
    return Money.from_cents(1000)


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """Set up test environment variables."""
    monkeypatch.setenv("CENTS_ENV", "test")
    monkeypatch.delenv("DEBUG", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    # Drop any cached configuration between tests
    monkeypatch.setattr(config_module, "_config", None)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "integration: Tests that read the process environment"
    )
    config.addinivalue_line(
        "markers", "currency: Tests for currency handling and precision"
    )
