"""
Formatting utilities for displaying prices and coin records.

This module provides the text rendering used by every command. Prices use
the shortest round-trip digits in plain positional notation, with no fixed
precision and no currency symbol.
"""

from decimal import Decimal

from ..domain.coin import CoinDetail, CoinSummary


def format_price(price: float | int) -> str:
    """
    Format a price for display.

    Integral values drop the trailing ``.0`` (50000.0 -> "50000") and no value
    is ever shown with an exponent (1.23e-05 -> "0.0000123").
    """
    text = format(Decimal(repr(float(price))), "f")
    if text.endswith(".0"):
        return text[:-2]
    return text


def format_coin_line(coin: CoinSummary) -> str:
    """Format one coin list entry."""
    return coin.to_line()


def format_coin_detail(detail: CoinDetail) -> str:
    """Format the body of the coin details block."""
    return (
        f"Name: {detail.name}\n"
        f"Symbol: {detail.symbol}\n"
        f"Description: {detail.description}\n"
        f"Rank: {detail.rank}"
    )


def format_price_line(name: str, symbol: str, price: float, currency: str) -> str:
    """Format the single-coin price line, e.g. ``1 Bitcoin (BTC) = 50000 USD``."""
    return f"1 {name} ({symbol}) = {format_price(price)} {currency}"


def format_comparison(
    coin1_id: str, price1: float, coin2_id: str, price2: float, currency: str
) -> str:
    """
    Format the verdict line of a price comparison.

    The strictly larger price wins; equal prices produce the same-value line.
    """
    if price1 > price2:
        return f"{coin1_id} is more valuable than {coin2_id} in {currency}"
    if price1 < price2:
        return f"{coin2_id} is more valuable than {coin1_id} in {currency}"
    return f"Both {coin1_id} and {coin2_id} have the same value in {currency}"
