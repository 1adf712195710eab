"""Pydantic schemas for portfolio and holding endpoints."""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from portfolio_tracker.domain.models import PortfolioType
from portfolio_tracker.domain.views import HoldingPerformance, PortfolioSummaryView


class PortfolioCreate(BaseModel):
    """Request schema for creating a portfolio."""

    name: str = Field(..., min_length=1, max_length=255, description="Portfolio name")
    description: Optional[str] = Field(default=None, max_length=2000)
    portfolio_type: PortfolioType = Field(
        default=PortfolioType.PERSONAL,
        description="Kind of portfolio",
    )


class PortfolioUpdate(BaseModel):
    """Request schema for editing a portfolio (all fields optional)."""

    name: Optional[str] = Field(default=None, max_length=255)
    description: Optional[str] = Field(default=None, max_length=2000)
    portfolio_type: Optional[PortfolioType] = None


class PortfolioResponse(BaseModel):
    """Response schema for a single portfolio."""

    model_config = {"from_attributes": True}

    portfolio_id: str
    name: str
    description: Optional[str] = None
    portfolio_type: PortfolioType
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class HoldingCreateRequest(BaseModel):
    """Request schema for adding a holding."""

    symbol: str = Field(..., min_length=1, max_length=20)
    shares: Decimal
    cost_basis: Decimal = Field(..., description="Per-share price paid")
    purchase_date: date


class HoldingUpdateRequest(BaseModel):
    """Request schema for editing a holding."""

    shares: Optional[Decimal] = None
    cost_basis: Optional[Decimal] = None
    purchase_date: Optional[date] = None


class HoldingResponse(BaseModel):
    """Response schema for a holding with its performance."""

    holding_id: str
    portfolio_id: str
    symbol: str
    shares: Decimal
    cost_basis: Decimal
    purchase_date: date
    current_price: Optional[Decimal] = None
    sector: Optional[str] = None
    current_value: Decimal
    total_cost: Decimal
    gain_loss: Decimal
    gain_loss_percent: Decimal

    @classmethod
    def from_performance(cls, performance: HoldingPerformance) -> "HoldingResponse":
        holding = performance.holding
        return cls(
            holding_id=holding.holding_id,
            portfolio_id=holding.portfolio_id,
            symbol=holding.symbol,
            shares=holding.shares,
            cost_basis=holding.cost_basis,
            purchase_date=holding.purchase_date,
            current_price=holding.current_price,
            sector=holding.sector,
            current_value=performance.current_value,
            total_cost=performance.total_cost,
            gain_loss=performance.gain_loss,
            gain_loss_percent=performance.gain_loss_percent,
        )


class PortfolioDetailResponse(PortfolioResponse):
    """Portfolio with holdings and gain/loss totals."""

    holdings: list[HoldingResponse]
    total_value: Decimal
    total_cost: Decimal
    gain_loss: Decimal
    gain_loss_percent: Decimal

    @classmethod
    def from_summary(cls, summary: PortfolioSummaryView) -> "PortfolioDetailResponse":
        portfolio = summary.portfolio
        return cls(
            portfolio_id=portfolio.portfolio_id,
            name=portfolio.name,
            description=portfolio.description,
            portfolio_type=portfolio.portfolio_type,
            created_at=portfolio.created_at,
            updated_at=portfolio.updated_at,
            holdings=[HoldingResponse.from_performance(p) for p in summary.holdings],
            total_value=summary.total_value,
            total_cost=summary.total_cost,
            gain_loss=summary.gain_loss,
            gain_loss_percent=summary.gain_loss_percent,
        )


class PriceRefreshResponse(BaseModel):
    """Response schema for a portfolio price refresh."""

    model_config = {"from_attributes": True}

    message: Optional[str] = None
    updated: int
    total: int
    errors: list[str]
