"""
Focused argument parsing for the Crypto CLI.

Defines one subparser per command so that routing and execution stay
separate from argument handling.
"""

import argparse

from .. import __version__


class CLIArgumentParser:
    """
    Focused argument parser that handles CLI argument parsing cleanly.

    Separates argument parsing from command routing and execution,
    providing better organization and testability.
    """

    def __init__(self):
        """Initialize the argument parser."""
        self.parser = argparse.ArgumentParser(
            prog="crypto-cli",
            description="A simple CLI to fetch cryptocurrency data",
        )
        self.parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
        self.subparsers = self.parser.add_subparsers(dest="command", help="Available commands")
        self._setup_all_parsers()

    def parse_args(self, args=None) -> argparse.Namespace:
        """Parse command line arguments."""
        return self.parser.parse_args(args)

    def print_help(self) -> None:
        """Print the top-level help text."""
        self.parser.print_help()

    def _setup_all_parsers(self) -> None:
        """Set up all command parsers."""
        self._setup_coin_commands()
        self._setup_price_commands()

    def _setup_coin_commands(self) -> None:
        """Set up coin information parsers (list-coins, coin-details)."""
        self.subparsers.add_parser("list-coins", help="Get the list of all coins")

        parser_details = self.subparsers.add_parser(
            "coin-details", help="Get details for a specific coin"
        )
        parser_details.add_argument("coin_id", help="Coin ID (e.g., btc-bitcoin)")

    def _setup_price_commands(self) -> None:
        """Set up price parsers (coin-price, compare-coins)."""
        parser_price = self.subparsers.add_parser(
            "coin-price", help="Get the price of a specific coin in a target currency"
        )
        parser_price.add_argument("coin_id", help="Coin ID (e.g., btc-bitcoin)")
        parser_price.add_argument(
            "target_currency", help="Target currency (e.g., usd, usdt, eth, doge)"
        )

        parser_compare = self.subparsers.add_parser(
            "compare-coins", help="Compare the prices of two coins in a target currency"
        )
        parser_compare.add_argument("coin1_id", help="First coin ID (e.g., btc-bitcoin)")
        parser_compare.add_argument("coin2_id", help="Second coin ID (e.g., eth-ethereum)")
        parser_compare.add_argument("target_currency", help="Target currency (e.g., usd, usdt)")


def create_cli_parser() -> CLIArgumentParser:
    """
    Factory function to create CLI argument parser.

    Returns:
        Configured CLIArgumentParser instance
    """
    return CLIArgumentParser()
