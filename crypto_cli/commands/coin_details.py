"""
Coin details command - Show every field of a single coin.
"""

import logging

from ..services.market_data_service import MarketDataService
from ..utilities.console import print_error, print_section_header
from ..utilities.constants import CryptoCLIError
from ..utilities.formatters import format_coin_detail
from .core.command_result import CommandResult

logger = logging.getLogger(__name__)


async def coin_details_command(service: MarketDataService, coin_id: str) -> CommandResult:
    """Get and display details for a specific coin"""
    try:
        detail = await service.get_coin_details(coin_id)
    except (CryptoCLIError, ValueError) as e:
        logger.error(f"coin-details failed for {coin_id}: {e}")
        print_error(f"Failed to get details for {coin_id}: {e}")
        return CommandResult.failure(e)

    print_section_header(f"        Coin Details for {detail.title}        ")
    print(format_coin_detail(detail))

    return CommandResult.success(detail)
