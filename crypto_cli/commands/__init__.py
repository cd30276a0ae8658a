"""
Commands package for the Crypto CLI.

Each command lives in its own module, receives a MarketDataService and
returns a CommandResult.
"""

from .coin_details import coin_details_command
from .coin_price import coin_price_command
from .compare_coins import compare_coins_command
from .core.command_result import CommandResult, CommandStatus
from .list_coins import list_coins_command

__all__ = [
    "CommandResult",
    "CommandStatus",
    "coin_details_command",
    "coin_price_command",
    "compare_coins_command",
    "list_coins_command",
]
