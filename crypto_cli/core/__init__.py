"""
Core API access for the Crypto CLI.
"""

from .api_client import CoinpaprikaAPIClient, create_api_client
from .types import MarketDataClient

__all__ = ["CoinpaprikaAPIClient", "MarketDataClient", "create_api_client"]
