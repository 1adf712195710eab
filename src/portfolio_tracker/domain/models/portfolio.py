"""Portfolio and holding domain models."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from portfolio_tracker.domain.models.enums import PortfolioType


@dataclass
class Portfolio:
    """Named container of holdings."""

    portfolio_id: str
    name: str
    description: Optional[str] = None
    portfolio_type: PortfolioType = PortfolioType.PERSONAL
    created_at: Optional[datetime] = field(default=None)
    updated_at: Optional[datetime] = field(default=None)

    def __post_init__(self) -> None:
        if isinstance(self.portfolio_type, str):
            self.portfolio_type = PortfolioType(self.portfolio_type)


@dataclass
class Holding:
    """
    A position in one symbol within a portfolio.

    cost_basis is the per-share price paid. current_price and sector are
    snapshots from the last quote/company-info lookup and only change when a
    holding is created or its portfolio's prices are refreshed.
    """

    holding_id: str
    portfolio_id: str
    symbol: str
    shares: Decimal
    cost_basis: Decimal
    purchase_date: date
    current_price: Optional[Decimal] = None
    sector: Optional[str] = None
    created_at: Optional[datetime] = field(default=None)
    updated_at: Optional[datetime] = field(default=None)
