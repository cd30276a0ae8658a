"""
Utilities package for the Crypto CLI.

Contains constants and errors, console output helpers, formatters,
logging configuration and the response parser.
"""

from .console import (
    print_banner,
    print_error,
    print_section_header,
)
from .constants import CryptoCLIError, DecodeError, PriceNotFoundError, TransportError
from .formatters import (
    format_coin_detail,
    format_coin_line,
    format_comparison,
    format_price,
    format_price_line,
)
from .logging_config import setup_logging
from .response_parser import CoinpaprikaResponseParser

__all__ = [
    # Errors
    "CryptoCLIError",
    "DecodeError",
    "PriceNotFoundError",
    "TransportError",
    # Console
    "print_banner",
    "print_error",
    "print_section_header",
    # Formatting
    "format_coin_detail",
    "format_coin_line",
    "format_comparison",
    "format_price",
    "format_price_line",
    # Parsing and logging
    "CoinpaprikaResponseParser",
    "setup_logging",
]
