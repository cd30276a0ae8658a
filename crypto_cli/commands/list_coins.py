"""
List coins command - Show every coin known to the API.
"""

import logging

from ..services.market_data_service import MarketDataService
from ..utilities.console import print_error, print_section_header
from ..utilities.constants import CryptoCLIError
from ..utilities.formatters import format_coin_line
from .core.command_result import CommandResult

logger = logging.getLogger(__name__)


async def list_coins_command(service: MarketDataService) -> CommandResult:
    """Get and display the list of all coins, one line per coin in API order"""
    try:
        coins = await service.list_coins()
    except CryptoCLIError as e:
        logger.error(f"list-coins failed: {e}")
        print_error(f"Failed to list coins: {e}")
        return CommandResult.failure(e)

    print_section_header("          Listing All Coins            ", leading_blank=False)
    for coin in coins:
        print(format_coin_line(coin))

    return CommandResult.success(coins, count=len(coins))
