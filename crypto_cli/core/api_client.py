"""
Pure async API client for the Coinpaprika REST API.

This module handles only HTTP communication: building URLs, issuing GET
requests and returning decoded JSON. Turning payloads into records is the
response parser's job.
"""

import logging
from typing import Any

import httpx

from ..config.client_config import ClientConfig
from ..utilities.constants import COINS_ENDPOINT, TICKERS_ENDPOINT, DecodeError, TransportError

logger = logging.getLogger(__name__)


class CoinpaprikaAPIClient:
    """
    Focused API client that handles only API communication.

    This class is responsible solely for:
    - URL construction for the coins and tickers endpoints
    - Raw GET requests through a shared httpx.AsyncClient
    - Mapping network and HTTP status failures to TransportError
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize API client.

        Args:
            config: Client configuration, defaults to the public API host
            transport: Optional httpx transport (tests pass httpx.MockTransport)
        """
        self.config = config or ClientConfig()
        self._client = httpx.AsyncClient(
            timeout=self.config.timeout,
            headers={"User-Agent": self.config.user_agent, "Accept": "application/json"},
            transport=transport,
        )

    async def __aenter__(self) -> "CoinpaprikaAPIClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._client.aclose()

    async def get_coins(self) -> Any:
        """Get the list of all coins."""
        return await self._get(COINS_ENDPOINT)

    async def get_coin(self, coin_id: str) -> Any:
        """Get details for a single coin."""
        self._validate_coin_id(coin_id)
        return await self._get(f"{COINS_ENDPOINT}/{coin_id.strip()}")

    async def get_ticker(self, coin_id: str) -> Any:
        """Get ticker data, including per-currency quotes, for a single coin."""
        self._validate_coin_id(coin_id)
        return await self._get(f"{TICKERS_ENDPOINT}/{coin_id.strip()}")

    async def _get(self, path: str) -> Any:
        """
        Issue a GET request and decode the JSON body.

        Raises:
            TransportError: If the request fails or the status is not 2xx
            DecodeError: If the body is not valid JSON
        """
        url = self.config.endpoint(path)
        logger.debug(f"GET {url}")

        try:
            response = await self._client.get(url)
        except httpx.TimeoutException as e:
            logger.debug(f"Request to {url} timed out: {e}")
            raise TransportError(f"Request timed out after {self.config.timeout}s", url=url) from e
        except httpx.HTTPError as e:
            logger.debug(f"Request to {url} failed: {e}")
            raise TransportError(f"Request to {url} failed: {e}", url=url) from e

        if not response.is_success:
            logger.debug(f"GET {url} returned {response.status_code}")
            raise TransportError(
                f"Request to {url} was rejected", url=url, status_code=response.status_code
            )

        try:
            return response.json()
        except ValueError as e:
            raise DecodeError(f"Response from {url} is not valid JSON: {e}") from e

    @staticmethod
    def _validate_coin_id(coin_id: str) -> None:
        if not coin_id or not coin_id.strip():
            raise ValueError("Coin ID cannot be empty")


def create_api_client(config: ClientConfig | None = None) -> CoinpaprikaAPIClient:
    """
    Factory function to create the Coinpaprika API client.

    Args:
        config: Optional client configuration

    Returns:
        CoinpaprikaAPIClient instance
    """
    return CoinpaprikaAPIClient(config)
