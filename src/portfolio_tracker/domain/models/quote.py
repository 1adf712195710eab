"""Market quote models."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from portfolio_tracker.domain.models.enums import QuoteSource


def normalize_symbol(symbol: Optional[str]) -> str:
    """Return the canonical (trimmed, upper-cased) form of a ticker symbol."""
    return (symbol or "").strip().upper()


@dataclass
class Quote:
    """
    Last known trade price for a symbol.

    last_updated is when the quote was obtained; cache freshness is measured
    against it. latest_trading_day is the market session the price belongs to.
    """

    symbol: str
    price: Decimal
    change: Decimal
    change_percent: Decimal
    volume: int
    last_updated: datetime
    latest_trading_day: Optional[date] = field(default=None)

    def __post_init__(self) -> None:
        self.symbol = normalize_symbol(self.symbol)
        if self.price < 0:
            raise ValueError(f"Quote price must be non-negative: {self.price}")


@dataclass
class CompanyInfo:
    """Company classification used to tag holdings by sector."""

    symbol: str
    name: str
    sector: str
    industry: str
    market_cap: Optional[int] = None


@dataclass
class SymbolMatch:
    """Single symbol search result."""

    symbol: str
    name: str


@dataclass
class QuoteLookup:
    """Outcome of a quote lookup, telling live data apart from fallbacks and misses."""

    symbol: str
    source: QuoteSource
    quote: Optional[Quote] = None

    @property
    def found(self) -> bool:
        return self.quote is not None
