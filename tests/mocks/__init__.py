"""
Mock utilities package for Crypto CLI tests.
"""

from .client_mocks import CoinpaprikaMockTransport, MockMarketDataClient

__all__ = ["CoinpaprikaMockTransport", "MockMarketDataClient"]
