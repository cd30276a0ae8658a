"""
Command routing for the Crypto CLI.

Maps a parsed subcommand to its command coroutine, owns the lifetime of
the API client for the invocation, and runs everything on one event loop.
"""

import argparse
import asyncio
import logging
from collections.abc import Awaitable, Callable

from ..commands import (
    coin_details_command,
    coin_price_command,
    compare_coins_command,
    list_coins_command,
)
from ..commands.core.command_result import CommandResult
from ..config.client_config import ClientConfig
from ..core.api_client import create_api_client
from ..services.market_data_service import MarketDataService, create_market_data_service

logger = logging.getLogger(__name__)

Handler = Callable[[MarketDataService, argparse.Namespace], Awaitable[CommandResult]]


class CommandRouter:
    """
    Routes parsed arguments to command implementations.

    One API client is created per routed command and closed when the
    command finishes, whatever its outcome.
    """

    def __init__(self, config: ClientConfig | None = None, client_factory=None):
        """
        Initialize the router.

        Args:
            config: Client configuration passed to the client factory
            client_factory: Callable building a client from a config
                (defaults to create_api_client)
        """
        self.config = config or ClientConfig()
        self.client_factory = client_factory or create_api_client
        self._handlers: dict[str, Handler] = {
            "list-coins": lambda service, args: list_coins_command(service),
            "coin-details": lambda service, args: coin_details_command(service, args.coin_id),
            "coin-price": lambda service, args: coin_price_command(
                service, args.coin_id, args.target_currency
            ),
            "compare-coins": lambda service, args: compare_coins_command(
                service, args.coin1_id, args.coin2_id, args.target_currency
            ),
        }

    @property
    def commands(self) -> list[str]:
        """Names of all routable commands."""
        return list(self._handlers)

    def route_command(self, args: argparse.Namespace) -> CommandResult:
        """Run the command named by ``args.command`` to completion."""
        return asyncio.run(self.dispatch(args))

    async def dispatch(self, args: argparse.Namespace) -> CommandResult:
        """
        Execute the command named by ``args.command``.

        Raises:
            ValueError: If the command is not known to the router
        """
        handler = self._handlers.get(args.command)
        if handler is None:
            raise ValueError(f"Unknown command: {args.command}")

        logger.debug(f"Dispatching {args.command}")
        client = self.client_factory(self.config)
        try:
            service = create_market_data_service(client)
            result = await handler(service, args)
        finally:
            await client.aclose()

        logger.debug(f"{args.command} finished: {result.status.value}")
        return result


def create_command_router(config: ClientConfig | None = None, client_factory=None) -> CommandRouter:
    """
    Factory function to create the command router.

    Returns:
        Configured CommandRouter instance
    """
    return CommandRouter(config, client_factory)
