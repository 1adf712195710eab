"""Domain models package."""

from portfolio_tracker.domain.models.enums import PortfolioType, QuoteSource
from portfolio_tracker.domain.models.quote import (
    Quote,
    CompanyInfo,
    SymbolMatch,
    QuoteLookup,
    normalize_symbol,
)
from portfolio_tracker.domain.models.portfolio import Portfolio, Holding

__all__ = [
    "PortfolioType",
    "QuoteSource",
    "Quote",
    "CompanyInfo",
    "SymbolMatch",
    "QuoteLookup",
    "normalize_symbol",
    "Portfolio",
    "Holding",
]
