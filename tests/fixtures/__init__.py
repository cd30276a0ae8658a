"""
Test fixtures package for the Crypto CLI.

Provides Coinpaprika payload builders organized by endpoint.
"""

from .api_responses import (
    APIResponseFixtures,
    ResponseStatus,
    coin_detail_payload,
    coin_summary_payload,
    ticker_payload,
    with_field,
    without_field,
)

__all__ = [
    "APIResponseFixtures",
    "ResponseStatus",
    "coin_detail_payload",
    "coin_summary_payload",
    "ticker_payload",
    "with_field",
    "without_field",
]
