"""
Crypto CLI - A command-line client for Coinpaprika market data.

This package provides commands for:
- Listing all coins
- Showing coin details
- Fetching a coin's price in a target currency
- Comparing two coins' prices
"""

__version__ = "1.0.0"
__author__ = "Crypto CLI Developer"
__description__ = "Command-line client for Coinpaprika cryptocurrency market data"

from .domain import CoinDetail, CoinSummary, CurrencyCode, Quote, Ticker
from .utilities.constants import CryptoCLIError, DecodeError, PriceNotFoundError, TransportError

__all__ = [
    "CoinDetail",
    "CoinSummary",
    "CryptoCLIError",
    "CurrencyCode",
    "DecodeError",
    "PriceNotFoundError",
    "Quote",
    "Ticker",
    "TransportError",
]
