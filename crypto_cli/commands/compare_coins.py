"""
Compare coins command - Compare two coins' prices in a target currency.

Unlike coin-price, a currency missing from either ticker is fatal: the
command fails before printing any part of the comparison.
"""

import logging

from ..domain.currency import CurrencyCode
from ..services.market_data_service import MarketDataService
from ..utilities.console import print_error, print_section_header
from ..utilities.constants import CryptoCLIError
from ..utilities.formatters import format_comparison, format_price
from .core.command_result import CommandResult

logger = logging.getLogger(__name__)


async def compare_coins_command(
    service: MarketDataService, coin1_id: str, coin2_id: str, target_currency: str
) -> CommandResult:
    """Compare the prices of two coins in the target currency"""
    try:
        currency = CurrencyCode(target_currency)
        # coin2 is not requested until coin1 has been fetched
        price1 = await service.get_price_value(coin1_id, currency)
        price2 = await service.get_price_value(coin2_id, currency)
    except (CryptoCLIError, ValueError) as e:
        logger.error(f"compare-coins failed for {coin1_id}/{coin2_id}: {e}")
        print_error(f"Failed to compare {coin1_id} and {coin2_id}: {e}")
        return CommandResult.failure(e)

    print_section_header(f"  Comparing {coin1_id} and {coin2_id} in {currency} Currency  ")
    print(f"{coin1_id} price: {format_price(price1)} {currency}")
    print(f"{coin2_id} price: {format_price(price2)} {currency}")
    print(format_comparison(coin1_id, price1, coin2_id, price2, currency.value))

    return CommandResult.success({coin1_id: price1, coin2_id: price2})
