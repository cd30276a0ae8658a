"""
Coin price command - Show a coin's price in a target currency.

A currency missing from the ticker's quotes is reported but is not a
failure; the command still succeeds.
"""

import logging

from ..domain.currency import CurrencyCode
from ..services.market_data_service import MarketDataService
from ..utilities.console import print_error, print_section_header
from ..utilities.constants import CryptoCLIError
from ..utilities.formatters import format_price_line
from .core.command_result import CommandResult

logger = logging.getLogger(__name__)


async def coin_price_command(service: MarketDataService, coin_id: str, target_currency: str) -> CommandResult:
    """Get and display the price of a coin in the target currency"""
    try:
        currency = CurrencyCode(target_currency)
        ticker = await service.get_ticker(coin_id)
    except (CryptoCLIError, ValueError) as e:
        logger.error(f"coin-price failed for {coin_id}: {e}")
        print_error(f"Failed to get price for {coin_id}: {e}")
        return CommandResult.failure(e)

    print_section_header(f"       Price for {ticker.title} in {currency}        ")

    price = ticker.get_price(currency)
    if price is None:
        logger.info(f"{ticker.id} has no {currency} quote")
        print(f"Could not find price information for {ticker.name} in {currency}")
        return CommandResult.success(None, found=False)

    print(format_price_line(ticker.name, ticker.symbol, price, currency.value))
    return CommandResult.success(price, found=True)
