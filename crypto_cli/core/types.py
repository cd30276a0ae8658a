"""
Shared protocol types for structural typing across services and clients.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class MarketDataClient(Protocol):
    """Minimal client contract used by the market data service.

    Real clients and test doubles are interchangeable as long as they
    implement these coroutines.
    """

    async def get_coins(self) -> Any: ...

    async def get_coin(self, coin_id: str) -> Any: ...

    async def get_ticker(self, coin_id: str) -> Any: ...
