"""Market data providers module."""

from portfolio_tracker.providers.quote_provider import QuoteProvider
from portfolio_tracker.providers.alpha_vantage_provider import AlphaVantageQuoteProvider
from portfolio_tracker.providers.static_data import STATIC_SYMBOLS

__all__ = [
    "QuoteProvider",
    "AlphaVantageQuoteProvider",
    "STATIC_SYMBOLS",
]
