"""Pydantic schemas for market data endpoints."""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel

from portfolio_tracker.domain.models import QuoteSource


class QuoteResponse(BaseModel):
    """Response schema for a single quote."""

    model_config = {"from_attributes": True}

    symbol: str
    price: Decimal
    change: Decimal
    change_percent: Decimal
    volume: int
    last_updated: datetime
    latest_trading_day: Optional[date] = None


class QuoteLookupResponse(BaseModel):
    """Quote plus where it came from."""

    quote: QuoteResponse
    source: QuoteSource


class CompanyInfoResponse(BaseModel):
    """Response schema for company classification."""

    model_config = {"from_attributes": True}

    symbol: str
    name: str
    sector: str
    industry: str
    market_cap: Optional[int] = None


class SymbolMatchResponse(BaseModel):
    """Single symbol search hit."""

    model_config = {"from_attributes": True}

    symbol: str
    name: str
