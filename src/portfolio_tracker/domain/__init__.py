"""Domain layer - pure business models with no external dependencies."""

from portfolio_tracker.domain.models import (
    Portfolio,
    Holding,
    Quote,
    CompanyInfo,
    SymbolMatch,
    QuoteLookup,
    PortfolioType,
    QuoteSource,
)

__all__ = [
    "Portfolio",
    "Holding",
    "Quote",
    "CompanyInfo",
    "SymbolMatch",
    "QuoteLookup",
    "PortfolioType",
    "QuoteSource",
]
