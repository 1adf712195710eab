"""Quote service: the single entry point for prices and company data."""

import logging
from typing import Optional

from portfolio_tracker.domain.models import (
    CompanyInfo,
    Quote,
    QuoteLookup,
    QuoteSource,
    SymbolMatch,
    normalize_symbol,
)
from portfolio_tracker.providers.quote_provider import QuoteProvider
from portfolio_tracker.repositories.protocols import QuoteCache

logger = logging.getLogger(__name__)


class QuoteService:
    """
    Facade over the quote cache and the quote provider.

    Fresh cache entries are served without touching the provider. Live
    provider results are written through to the cache; static fallback
    results are not, so they are re-derived on every call.
    """

    def __init__(self, provider: QuoteProvider, cache: QuoteCache):
        self._provider = provider
        self._cache = cache

    def lookup(self, symbol: str) -> QuoteLookup:
        """Look up a quote and report where the answer came from."""
        symbol = normalize_symbol(symbol)
        if not symbol:
            return QuoteLookup(symbol=symbol, source=QuoteSource.NOT_FOUND)

        cached = self._cache.get(symbol)
        if cached is not None:
            logger.debug("Using cached price for %s", symbol)
            return QuoteLookup(symbol=symbol, source=QuoteSource.CACHED, quote=cached)

        return self._fetch(symbol)

    def get_quote(self, symbol: str) -> Optional[Quote]:
        """Return the best available quote, or None if the symbol cannot be resolved."""
        return self.lookup(symbol).quote

    def get_multiple_quotes(self, symbols: list[str]) -> list[Quote]:
        """
        Resolve quotes one symbol at a time in input order.

        Duplicate symbols are resolved once. Cache hits are free; the
        provider's rate-limit delay is inserted only between live calls.
        Unresolved symbols are omitted.
        """
        quotes: list[Quote] = []
        seen: set[str] = set()
        live_calls = 0

        for raw_symbol in symbols:
            symbol = normalize_symbol(raw_symbol)
            if not symbol or symbol in seen:
                continue
            seen.add(symbol)

            cached = self._cache.get(symbol)
            if cached is not None:
                quotes.append(cached)
                continue

            if self._provider.is_live and live_calls > 0:
                self._provider.wait_between_requests()
            lookup = self._fetch(symbol)
            if self._provider.is_live:
                live_calls += 1
            if lookup.quote is not None:
                quotes.append(lookup.quote)

        return quotes

    def get_company_info(self, symbol: str) -> Optional[CompanyInfo]:
        """Company classification; not cached."""
        return self._provider.get_company_info(symbol)

    def search_symbols(self, query: str) -> list[SymbolMatch]:
        return self._provider.search_symbols(query)

    def validate_symbol(self, symbol: str) -> bool:
        return self.lookup(symbol).found

    def invalidate(self, symbol: str) -> None:
        """Drop the cached quote for one symbol."""
        self._cache.invalidate(symbol)

    def invalidate_all(self) -> None:
        """Drop every cached quote."""
        self._cache.invalidate_all()

    def _fetch(self, symbol: str) -> QuoteLookup:
        lookup = self._provider.get_quote(symbol)
        if lookup.source == QuoteSource.LIVE and lookup.quote is not None:
            self._cache.put(lookup.quote)
        return lookup
