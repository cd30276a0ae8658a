"""
Centralized response parsing for Coinpaprika API payloads.

Every endpoint returns a fixed JSON shape. This module turns those payloads
into domain records and rejects anything that does not match: a single
missing or mistyped field fails the whole response.
"""

import logging
from typing import Any

from ..domain.coin import CoinDetail, CoinSummary
from ..domain.ticker import Quote, Ticker
from .constants import DecodeError

logger = logging.getLogger(__name__)

MAX_RANK = 0xFFFFFFFF


def _require_object(data: Any, context: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise DecodeError(f"{context}: expected a JSON object, got {type(data).__name__}")
    return data


def _require_field(data: dict[str, Any], key: str, context: str) -> Any:
    if key not in data:
        raise DecodeError(f"{context}: missing field '{key}'")
    return data[key]


def _require_str(data: dict[str, Any], key: str, context: str) -> str:
    value = _require_field(data, key, context)
    if not isinstance(value, str):
        raise DecodeError(
            f"{context}: field '{key}' must be a string, got {type(value).__name__}"
        )
    return value


def _require_rank(data: dict[str, Any], context: str) -> int:
    value = _require_field(data, "rank", context)
    # bool is a subclass of int
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(
            f"{context}: field 'rank' must be an integer, got {type(value).__name__}"
        )
    if value < 0 or value > MAX_RANK:
        raise DecodeError(
            f"{context}: field 'rank' must be between 0 and {MAX_RANK}, got {value}"
        )
    return value


class CoinpaprikaResponseParser:
    """
    Parser for Coinpaprika responses.

    All methods are static and raise DecodeError on shape mismatch. There is
    no lenient mode.
    """

    @staticmethod
    def parse_coin_summary(data: Any) -> CoinSummary:
        """
        Parse one entry of the ``/coins`` response.

        Args:
            data: Decoded JSON value

        Returns:
            CoinSummary record

        Raises:
            DecodeError: If the entry is not an object or a field is missing or mistyped
        """
        context = "coin summary"
        obj = _require_object(data, context)
        return CoinSummary(
            id=_require_str(obj, "id", context),
            name=_require_str(obj, "name", context),
            symbol=_require_str(obj, "symbol", context),
            rank=_require_rank(obj, context),
        )

    @staticmethod
    def parse_coin_list(data: Any) -> list[CoinSummary]:
        """
        Parse the ``/coins`` response, preserving the order received.

        Raises:
            DecodeError: If the body is not an array or any entry is malformed
        """
        if not isinstance(data, list):
            raise DecodeError(f"coin list: expected a JSON array, got {type(data).__name__}")

        coins = []
        for index, entry in enumerate(data):
            try:
                coins.append(CoinpaprikaResponseParser.parse_coin_summary(entry))
            except DecodeError as e:
                raise DecodeError(f"coin list entry {index}: {e}") from e

        logger.debug(f"Parsed {len(coins)} coin summaries")
        return coins

    @staticmethod
    def parse_coin_detail(data: Any) -> CoinDetail:
        """
        Parse the ``/coins/{id}`` response.

        A ``null`` description is treated as a type mismatch.
        """
        context = "coin detail"
        obj = _require_object(data, context)
        return CoinDetail(
            id=_require_str(obj, "id", context),
            name=_require_str(obj, "name", context),
            symbol=_require_str(obj, "symbol", context),
            description=_require_str(obj, "description", context),
            rank=_require_rank(obj, context),
        )

    @staticmethod
    def parse_quote(data: Any) -> Quote:
        """Parse a single quote object; ``price`` may be any JSON number."""
        context = "quote"
        obj = _require_object(data, context)
        price = _require_field(obj, "price", context)
        if isinstance(price, bool) or not isinstance(price, int | float):
            raise DecodeError(
                f"{context}: field 'price' must be a number, got {type(price).__name__}"
            )
        try:
            return Quote(price=float(price))
        except OverflowError as e:
            raise DecodeError(f"{context}: field 'price' is out of range") from e

    @staticmethod
    def parse_ticker(data: Any) -> Ticker:
        """
        Parse the ``/tickers/{id}`` response.

        Args:
            data: Decoded JSON value

        Returns:
            Ticker with one Quote per currency key

        Raises:
            DecodeError: If the ticker or any nested quote is malformed
        """
        context = "ticker"
        obj = _require_object(data, context)
        raw_quotes = _require_field(obj, "quotes", context)
        if not isinstance(raw_quotes, dict):
            raise DecodeError(
                f"{context}: field 'quotes' must be an object, got {type(raw_quotes).__name__}"
            )

        quotes = {}
        for currency, raw_quote in raw_quotes.items():
            try:
                quotes[currency] = CoinpaprikaResponseParser.parse_quote(raw_quote)
            except DecodeError as e:
                raise DecodeError(f"{context} quote '{currency}': {e}") from e

        return Ticker(
            id=_require_str(obj, "id", context),
            name=_require_str(obj, "name", context),
            symbol=_require_str(obj, "symbol", context),
            rank=_require_rank(obj, context),
            quotes=quotes,
        )
