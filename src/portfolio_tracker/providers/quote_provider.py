"""Quote provider protocol."""

from typing import Optional, Protocol

from portfolio_tracker.domain.models import CompanyInfo, Quote, QuoteLookup, SymbolMatch


class QuoteProvider(Protocol):
    """
    Protocol for market data sources.

    Lookups never raise for upstream trouble; failures degrade to static
    data or to a NOT_FOUND / UNAVAILABLE lookup.
    """

    @property
    def is_live(self) -> bool:
        """True when the provider calls an upstream API."""
        ...

    def wait_between_requests(self) -> None:
        """Block for the delay required between consecutive live calls."""
        ...

    def get_quote(self, symbol: str) -> QuoteLookup:
        """Look up a single quote."""
        ...

    def get_multiple_quotes(self, symbols: list[str]) -> list[Quote]:
        """Look up quotes sequentially; unresolved symbols are omitted."""
        ...

    def get_company_info(self, symbol: str) -> Optional[CompanyInfo]:
        """Look up company name and sector classification."""
        ...

    def search_symbols(self, query: str) -> list[SymbolMatch]:
        """Search symbols by ticker or company name (at most 10 results)."""
        ...

    def validate_symbol(self, symbol: str) -> bool:
        """True iff a quote can be found for the symbol."""
        ...
