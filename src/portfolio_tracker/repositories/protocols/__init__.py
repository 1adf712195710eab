"""Repository protocol definitions (interfaces)."""

from portfolio_tracker.repositories.protocols.quote_cache import QuoteCache, is_fresh
from portfolio_tracker.repositories.protocols.portfolio_repo import PortfolioRepository
from portfolio_tracker.repositories.protocols.holding_repo import HoldingRepository

__all__ = [
    "QuoteCache",
    "is_fresh",
    "PortfolioRepository",
    "HoldingRepository",
]
