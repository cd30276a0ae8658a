"""
Market data service combining the API client with the response parser.

Commands talk to this service rather than to the raw client, so every
payload reaching a command has already been decoded into domain records.
"""

import logging

from ..core.types import MarketDataClient
from ..domain.coin import CoinDetail, CoinSummary
from ..domain.currency import CurrencyCode
from ..domain.ticker import Ticker
from ..utilities.constants import PriceNotFoundError
from ..utilities.response_parser import CoinpaprikaResponseParser

logger = logging.getLogger(__name__)


class MarketDataService:
    """
    High-level market data operations.

    Each method performs exactly one request. There is no caching: every
    call reaches the API.
    """

    def __init__(self, client: MarketDataClient):
        """
        Initialize market data service.

        Args:
            client: Any object implementing the MarketDataClient protocol
        """
        self.client = client
        self.parser = CoinpaprikaResponseParser

    async def list_coins(self) -> list[CoinSummary]:
        """Fetch and decode the full coin list."""
        data = await self.client.get_coins()
        coins = self.parser.parse_coin_list(data)
        logger.info(f"Retrieved {len(coins)} coins")
        return coins

    async def get_coin_details(self, coin_id: str) -> CoinDetail:
        """Fetch and decode details for one coin."""
        data = await self.client.get_coin(coin_id)
        detail = self.parser.parse_coin_detail(data)
        logger.info(f"Retrieved details for {detail.id}")
        return detail

    async def get_ticker(self, coin_id: str) -> Ticker:
        """Fetch and decode the ticker for one coin."""
        data = await self.client.get_ticker(coin_id)
        ticker = self.parser.parse_ticker(data)
        logger.info(f"Retrieved ticker for {ticker.id} with {len(ticker.quotes)} quotes")
        return ticker

    async def get_price_value(self, coin_id: str, currency: str | CurrencyCode) -> float:
        """
        Fetch a coin's price in a currency, treating a missing quote as an error.

        Args:
            coin_id: Coin ID (e.g. btc-bitcoin)
            currency: Target currency in any casing

        Returns:
            The quoted price

        Raises:
            PriceNotFoundError: If the ticker has no quote for the currency
        """
        code = currency if isinstance(currency, CurrencyCode) else CurrencyCode(currency)
        ticker = await self.get_ticker(coin_id)
        price = ticker.get_price(code)
        if price is None:
            logger.warning(f"No {code} quote for {coin_id}")
            raise PriceNotFoundError(coin_id, code.value)
        return price


def create_market_data_service(client: MarketDataClient) -> MarketDataService:
    """Factory function to create the market data service."""
    return MarketDataService(client)
