"""In-memory QuoteCache for tests and single-process use."""

from dataclasses import replace
from datetime import datetime, timedelta
from typing import Callable, Optional

from portfolio_tracker.core.timezone import now_eastern, to_eastern
from portfolio_tracker.domain.models import Quote, normalize_symbol
from portfolio_tracker.repositories.protocols.quote_cache import is_fresh


class InMemoryQuoteCache:
    """Dict-backed quote cache with lazy expiry on read."""

    def __init__(
        self,
        expiry_minutes: float = 5,
        clock: Callable[[], datetime] = now_eastern,
    ):
        self._expiry = timedelta(minutes=expiry_minutes)
        self._clock = clock
        self._entries: dict[str, Quote] = {}

    def get(self, symbol: str) -> Optional[Quote]:
        """Return the cached quote if present and fresh."""
        quote = self._entries.get(normalize_symbol(symbol))
        if quote is None or not is_fresh(quote.last_updated, self._clock(), self._expiry):
            return None
        return quote

    def get_many(self, symbols: list[str]) -> dict[str, Quote]:
        """Return fresh cached quotes keyed by upper-cased symbol."""
        result: dict[str, Quote] = {}
        for symbol in symbols:
            quote = self.get(symbol)
            if quote is not None:
                result[quote.symbol] = quote
        return result

    def put(self, quote: Quote) -> None:
        """Insert or overwrite the entry for quote.symbol. Naive timestamps are taken as Eastern."""
        self._entries[normalize_symbol(quote.symbol)] = replace(
            quote, last_updated=to_eastern(quote.last_updated)
        )

    def invalidate(self, symbol: str) -> None:
        """Remove the entry for one symbol."""
        self._entries.pop(normalize_symbol(symbol), None)

    def invalidate_all(self) -> None:
        """Remove every entry."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
