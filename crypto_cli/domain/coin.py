"""
Coin records decoded from the coins endpoints.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CoinSummary:
    """One entry of the coins list response."""

    id: str
    name: str
    symbol: str
    rank: int

    def to_line(self) -> str:
        """Render as a single listing line."""
        return f"{self.name} ({self.symbol}) - Rank: {self.rank}"


@dataclass(frozen=True)
class CoinDetail:
    """Full record returned by the coin details endpoint."""

    id: str
    name: str
    symbol: str
    description: str
    rank: int

    @property
    def title(self) -> str:
        return f"{self.name} ({self.symbol})"
