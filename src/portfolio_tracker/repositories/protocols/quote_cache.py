"""Quote cache protocol and freshness rule."""

from datetime import datetime, timedelta
from typing import Protocol, Optional

from portfolio_tracker.domain.models import Quote


def is_fresh(last_updated: datetime, now: datetime, expiry_window: timedelta) -> bool:
    """
    Return True while a cached quote is within the expiry window.

    A non-positive window means nothing is ever fresh.
    """
    if expiry_window <= timedelta(0):
        return False
    return now - last_updated <= expiry_window


class QuoteCache(Protocol):
    """
    Interface for last-known-quote storage keyed by upper-cased symbol.

    Implementations never raise: storage failures read as a miss and writes
    are dropped.
    """

    def get(self, symbol: str) -> Optional[Quote]:
        """Return the cached quote if present and fresh."""
        ...

    def get_many(self, symbols: list[str]) -> dict[str, Quote]:
        """Return fresh cached quotes keyed by upper-cased symbol."""
        ...

    def put(self, quote: Quote) -> None:
        """Insert or overwrite the entry for quote.symbol."""
        ...

    def invalidate(self, symbol: str) -> None:
        """Remove the entry for one symbol."""
        ...

    def invalidate_all(self) -> None:
        """Remove every entry."""
        ...
