"""View models for service outputs."""

from portfolio_tracker.domain.views.portfolio import (
    HoldingPerformance,
    PortfolioSummaryView,
    PriceRefreshResult,
)

__all__ = [
    "HoldingPerformance",
    "PortfolioSummaryView",
    "PriceRefreshResult",
]
