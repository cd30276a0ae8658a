"""
CurrencyCode value object for quote lookups.

Ticker quotes are keyed by uppercase currency codes, so user input is
normalized once here instead of at every lookup site.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CurrencyCode:
    """
    Immutable, uppercase currency code (e.g. USD, BTC, ETH).

    Accepts any casing and surrounding whitespace on construction.
    """

    value: str

    def __post_init__(self):
        """Normalize and validate the code after initialization."""
        if not isinstance(self.value, str):
            raise ValueError(f"Currency code must be a string, got: {type(self.value)}")

        normalized = self.value.strip().upper()
        if not normalized:
            raise ValueError("Currency code cannot be empty")

        # Frozen dataclass: bypass __setattr__ to store the normalized form
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"CurrencyCode('{self.value}')"

    def __eq__(self, other) -> bool:
        if isinstance(other, CurrencyCode):
            return self.value == other.value
        if isinstance(other, str):
            return self.value == other.strip().upper()
        return False

    def __hash__(self) -> int:
        return hash(self.value)
