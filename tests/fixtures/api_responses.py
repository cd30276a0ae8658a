"""
API response fixtures for testing.

Builds realistic Coinpaprika payloads for the coins, coin details and
tickers endpoints, plus helpers for malformed variants.
"""

import copy
from enum import Enum
from typing import Any


class ResponseStatus(Enum):
    """API response status codes."""

    SUCCESS = 200
    BAD_REQUEST = 400
    NOT_FOUND = 404
    RATE_LIMITED = 429
    SERVER_ERROR = 500


def coin_summary_payload(
    coin_id: str = "btc-bitcoin", name: str = "Bitcoin", symbol: str = "BTC", rank: int = 1
) -> dict[str, Any]:
    """One entry of the /coins response, with the extra fields the API sends."""
    return {
        "id": coin_id,
        "name": name,
        "symbol": symbol,
        "rank": rank,
        "is_new": False,
        "is_active": True,
        "type": "coin",
    }


def coin_detail_payload(
    coin_id: str = "btc-bitcoin",
    name: str = "Bitcoin",
    symbol: str = "BTC",
    description: str = "Bitcoin is a cryptocurrency and worldwide payment system.",
    rank: int = 1,
) -> dict[str, Any]:
    """The /coins/{id} response."""
    return {
        "id": coin_id,
        "name": name,
        "symbol": symbol,
        "rank": rank,
        "is_new": False,
        "is_active": True,
        "type": "coin",
        "description": description,
        "open_source": True,
        "started_at": "2009-01-03T00:00:00Z",
        "tags": [{"id": "cryptocurrency", "name": "Cryptocurrency"}],
    }


def ticker_payload(
    coin_id: str = "btc-bitcoin",
    name: str = "Bitcoin",
    symbol: str = "BTC",
    rank: int = 1,
    prices: dict[str, float] | None = None,
) -> dict[str, Any]:
    """The /tickers/{id} response with one quote per entry of ``prices``."""
    if prices is None:
        prices = {"USD": 50000.0}
    return {
        "id": coin_id,
        "name": name,
        "symbol": symbol,
        "rank": rank,
        "total_supply": 19700000,
        "max_supply": 21000000,
        "last_updated": "2024-05-01T12:00:00Z",
        "quotes": {
            currency: {
                "price": price,
                "volume_24h": 1_000_000.0,
                "market_cap": 1_000_000_000,
                "percent_change_24h": 1.25,
            }
            for currency, price in prices.items()
        },
    }


def without_field(payload: dict[str, Any], field: str) -> dict[str, Any]:
    """Return a deep copy of ``payload`` with ``field`` removed."""
    broken = copy.deepcopy(payload)
    broken.pop(field, None)
    return broken


def with_field(payload: dict[str, Any], field: str, value: Any) -> dict[str, Any]:
    """Return a deep copy of ``payload`` with ``field`` replaced."""
    changed = copy.deepcopy(payload)
    changed[field] = value
    return changed


class APIResponseFixtures:
    """Collection of ready-made payloads keyed by scenario."""

    COIN_LIST = [
        coin_summary_payload("btc-bitcoin", "Bitcoin", "BTC", 1),
        coin_summary_payload("eth-ethereum", "Ethereum", "ETH", 2),
        coin_summary_payload("usdt-tether", "Tether", "USDT", 3),
    ]

    BTC_DETAIL = coin_detail_payload()

    BTC_TICKER = ticker_payload(prices={"USD": 50000.0, "BTC": 1.0, "ETH": 16.5})
    ETH_TICKER = ticker_payload(
        "eth-ethereum", "Ethereum", "ETH", 2, prices={"USD": 3000.0, "BTC": 0.06}
    )
    EUR_ONLY_TICKER = ticker_payload(
        "xyz-euro-coin", "Euro Coin", "XYZ", 500, prices={"EUR": 1.0}
    )

    @classmethod
    def coin_list(cls) -> list[dict[str, Any]]:
        return copy.deepcopy(cls.COIN_LIST)

    @classmethod
    def tickers(cls) -> dict[str, dict[str, Any]]:
        return {
            "btc-bitcoin": copy.deepcopy(cls.BTC_TICKER),
            "eth-ethereum": copy.deepcopy(cls.ETH_TICKER),
            "xyz-euro-coin": copy.deepcopy(cls.EUR_ONLY_TICKER),
        }
