"""
Constants and error types shared across the Crypto CLI.

Holds the API defaults, console emoji, banner text and the exception
hierarchy raised by the client, the response parser and the commands.
"""

# API defaults
DEFAULT_BASE_URL = "https://api.coinpaprika.com/v1"
DEFAULT_TIMEOUT = 5.0
COINS_ENDPOINT = "/coins"
TICKERS_ENDPOINT = "/tickers"

# Console emoji
EMOJI_ERROR = "❌"

# Section header width used by every command
HEADER_WIDTH = 39

BANNER_LINES = (
    "=========================================================",
    "█▀█ █▀█ █▀▀ █▀█ ▀█▀ █ █▀▀ ▀█▀ █ █▄ █ █▀▀ █▀█ ▀█▀ █▄ █ ",
    "█▄█ █▀▄ █▄▄ █▀▄  █  █ █▄▄  █  █ █ ▀█ ██▄ █▀▄  █  █ ▀█",
    "=========================================================",
    "             Welcome to the Crypto CLI Tool              ",
    "=========================================================",
    "Fetch real-time cryptocurrency data like prices, details,",
    "",
    "compare coins, and more!",
    "",
    "Available Commands:",
    "  - list-coins                                   -> Show a list of all coins",
    "  - coin-details <coin_id>                       -> Show details for a specific coin",
    "  - coin-price <coin_id> <target_currency>       -> Get the price of a coin in a target currency",
    "  - compare-coins <coin1_id> <coin2_id> <target_currency> -> Compare two coins",
    "=========================================================",
)


class CryptoCLIError(Exception):
    """Base class for every failure surfaced by a command."""


class TransportError(CryptoCLIError):
    """Raised when an HTTP request cannot complete or returns a non-success status."""

    def __init__(self, message: str, url: str | None = None, status_code: int | None = None):
        self.url = url
        self.status_code = status_code
        if status_code is not None:
            message = f"{message} (status {status_code})"
        super().__init__(message)


class DecodeError(CryptoCLIError):
    """Raised when a response body does not match the expected record shape."""


class PriceNotFoundError(CryptoCLIError):
    """Raised when a ticker has no quote for the requested currency."""

    def __init__(self, coin_id: str, currency: str):
        self.coin_id = coin_id
        self.currency = currency
        super().__init__(f"Could not find price information for {coin_id} in {currency}")
