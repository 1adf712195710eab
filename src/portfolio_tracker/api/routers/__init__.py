"""API routers package."""

from portfolio_tracker.api.routers.market_data import router as market_data_router
from portfolio_tracker.api.routers.portfolios import router as portfolios_router

__all__ = [
    "market_data_router",
    "portfolios_router",
]
