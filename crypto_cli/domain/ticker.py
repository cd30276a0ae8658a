"""
Ticker and quote records decoded from the tickers endpoint.

A ticker carries one quote per currency code. Looking up a currency that
is not quoted is a normal outcome and returns None.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .currency import CurrencyCode


@dataclass(frozen=True)
class Quote:
    """A single price denominated in one currency."""

    price: float


@dataclass(frozen=True)
class Ticker:
    """
    Market data for one coin.

    ``quotes`` maps uppercase currency codes to their Quote and is exposed
    as a read-only mapping.
    """

    id: str
    name: str
    symbol: str
    rank: int
    quotes: Mapping[str, Quote] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "quotes", MappingProxyType(dict(self.quotes)))

    @property
    def title(self) -> str:
        return f"{self.name} ({self.symbol})"

    def get_quote(self, currency: str | CurrencyCode) -> Quote | None:
        """
        Look up the quote for a currency, matching case-insensitively.

        Args:
            currency: Currency code in any casing, or a CurrencyCode

        Returns:
            The Quote if the ticker is quoted in that currency, None otherwise
        """
        code = currency if isinstance(currency, CurrencyCode) else CurrencyCode(currency)
        return self.quotes.get(code.value)

    def get_price(self, currency: str | CurrencyCode) -> float | None:
        """Return the price in ``currency`` or None when it is not quoted."""
        quote = self.get_quote(currency)
        return quote.price if quote is not None else None

    def currencies(self) -> list[str]:
        """Sorted list of quoted currency codes."""
        return sorted(self.quotes)
