"""View models for portfolio outputs."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from portfolio_tracker.domain.models import Holding, Portfolio

_HUNDRED = Decimal("100")


def _gain_loss_percent(gain_loss: Decimal, total_cost: Decimal) -> Decimal:
    if total_cost <= 0:
        return Decimal("0")
    return gain_loss / total_cost * _HUNDRED


@dataclass
class HoldingPerformance:
    """Holding with its value and gain/loss against cost basis."""

    holding: Holding
    current_value: Decimal
    total_cost: Decimal
    gain_loss: Decimal
    gain_loss_percent: Decimal

    @classmethod
    def from_holding(cls, holding: Holding) -> "HoldingPerformance":
        """Value a holding; an unpriced holding is valued at its cost basis."""
        price = holding.current_price if holding.current_price is not None else holding.cost_basis
        current_value = holding.shares * price
        total_cost = holding.shares * holding.cost_basis
        gain_loss = current_value - total_cost
        return cls(
            holding=holding,
            current_value=current_value,
            total_cost=total_cost,
            gain_loss=gain_loss,
            gain_loss_percent=_gain_loss_percent(gain_loss, total_cost),
        )


@dataclass
class PortfolioSummaryView:
    """Portfolio with per-holding performance and totals."""

    portfolio: Portfolio
    holdings: list[HoldingPerformance] = field(default_factory=list)
    total_value: Decimal = field(default_factory=lambda: Decimal("0"))
    total_cost: Decimal = field(default_factory=lambda: Decimal("0"))
    gain_loss: Decimal = field(default_factory=lambda: Decimal("0"))
    gain_loss_percent: Decimal = field(default_factory=lambda: Decimal("0"))

    @classmethod
    def build(cls, portfolio: Portfolio, holdings: list[Holding]) -> "PortfolioSummaryView":
        performances = [HoldingPerformance.from_holding(h) for h in holdings]
        total_value = sum((p.current_value for p in performances), Decimal("0"))
        total_cost = sum((p.total_cost for p in performances), Decimal("0"))
        gain_loss = total_value - total_cost
        return cls(
            portfolio=portfolio,
            holdings=performances,
            total_value=total_value,
            total_cost=total_cost,
            gain_loss=gain_loss,
            gain_loss_percent=_gain_loss_percent(gain_loss, total_cost),
        )


@dataclass
class PriceRefreshResult:
    """Outcome of refreshing a portfolio's holding prices."""

    updated: int = 0
    total: int = 0
    errors: list[str] = field(default_factory=list)
    message: Optional[str] = None
