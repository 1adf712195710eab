"""Repository layer - data access abstractions and implementations."""

from portfolio_tracker.repositories.protocols import (
    QuoteCache,
    PortfolioRepository,
    HoldingRepository,
)

__all__ = [
    "QuoteCache",
    "PortfolioRepository",
    "HoldingRepository",
]
