"""
Pytest configuration and shared fixtures for Crypto CLI tests.

Provides markers by test location, payload fixtures and fake clients so
that no test touches the network.
"""

import logging
from typing import Any

import pytest

from crypto_cli.config.client_config import ClientConfig
from crypto_cli.services.market_data_service import MarketDataService

from .fixtures.api_responses import APIResponseFixtures
from .mocks.client_mocks import MockMarketDataClient

TEST_BASE_URL = "https://api.test.invalid/v1"


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test (fast, isolated)")
    config.addinivalue_line(
        "markers", "integration: mark test as integration test (fake transport wiring)"
    )
    config.addinivalue_line("markers", "property: mark test as property-based test")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on test location."""
    for item in items:
        path = str(item.fspath)
        if "unit" in path:
            item.add_marker(pytest.mark.unit)
        elif "integration" in path:
            item.add_marker(pytest.mark.integration)
        elif "property" in path:
            item.add_marker(pytest.mark.property)


# Payload fixtures
@pytest.fixture
def coin_list_payload() -> list[dict[str, Any]]:
    """Three-coin /coins response."""
    return APIResponseFixtures.coin_list()


@pytest.fixture
def ticker_payloads() -> dict[str, dict[str, Any]]:
    """Ticker responses keyed by coin ID."""
    return APIResponseFixtures.tickers()


# Client and service fixtures
@pytest.fixture
def test_config() -> ClientConfig:
    """Client configuration pointing at a non-routable host."""
    return ClientConfig(base_url=TEST_BASE_URL, timeout=1.0)


@pytest.fixture
def mock_client() -> MockMarketDataClient:
    """In-memory market data client with default payloads."""
    return MockMarketDataClient()


@pytest.fixture
def market_data_service(mock_client) -> MarketDataService:
    """Market data service backed by the in-memory client."""
    return MarketDataService(mock_client)


# Environment fixtures
@pytest.fixture
def clean_env(monkeypatch):
    """Remove every CRYPTO_CLI_* variable from the environment."""
    for key in ("CRYPTO_CLI_BASE_URL", "CRYPTO_CLI_TIMEOUT", "CRYPTO_CLI_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Leave the package logger as each test found it."""
    logger = logging.getLogger("crypto_cli")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
