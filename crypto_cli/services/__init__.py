"""
Service layer for the Crypto CLI.
"""

from .market_data_service import MarketDataService, create_market_data_service

__all__ = ["MarketDataService", "create_market_data_service"]
