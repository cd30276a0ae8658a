"""
Domain records for Coinpaprika market data.

All records are immutable and live only for the duration of one command.
"""

from .coin import CoinDetail, CoinSummary
from .currency import CurrencyCode
from .ticker import Quote, Ticker

__all__ = ["CoinDetail", "CoinSummary", "CurrencyCode", "Quote", "Ticker"]
