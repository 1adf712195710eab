"""Pydantic schemas for API request/response."""

from portfolio_tracker.api.schemas.market_data import (
    QuoteResponse,
    QuoteLookupResponse,
    CompanyInfoResponse,
    SymbolMatchResponse,
)
from portfolio_tracker.api.schemas.portfolio import (
    PortfolioCreate,
    PortfolioUpdate,
    PortfolioResponse,
    PortfolioDetailResponse,
    HoldingCreateRequest,
    HoldingUpdateRequest,
    HoldingResponse,
    PriceRefreshResponse,
)

__all__ = [
    "QuoteResponse",
    "QuoteLookupResponse",
    "CompanyInfoResponse",
    "SymbolMatchResponse",
    "PortfolioCreate",
    "PortfolioUpdate",
    "PortfolioResponse",
    "PortfolioDetailResponse",
    "HoldingCreateRequest",
    "HoldingUpdateRequest",
    "HoldingResponse",
    "PriceRefreshResponse",
]
