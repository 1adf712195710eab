"""Service layer - business logic orchestration."""

from portfolio_tracker.services.quote_service import QuoteService
from portfolio_tracker.services.portfolio_service import (
    PortfolioService,
    HoldingCreate,
    HoldingUpdate,
)

__all__ = [
    "QuoteService",
    "PortfolioService",
    "HoldingCreate",
    "HoldingUpdate",
]
