"""Portfolio service for portfolio and holding management."""

import logging
import uuid
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from portfolio_tracker.core.exceptions import ConflictError, NotFoundError, ValidationError
from portfolio_tracker.core.timezone import now_eastern
from portfolio_tracker.domain.models import Holding, Portfolio, PortfolioType, normalize_symbol
from portfolio_tracker.domain.views import PortfolioSummaryView, PriceRefreshResult
from portfolio_tracker.repositories.protocols import HoldingRepository, PortfolioRepository
from portfolio_tracker.services.quote_service import QuoteService

logger = logging.getLogger(__name__)


@dataclass
class HoldingCreate:
    """Input data for adding a holding."""

    symbol: str
    shares: Decimal
    cost_basis: Decimal
    purchase_date: date


@dataclass
class HoldingUpdate:
    """Partial update data for editing a holding."""

    shares: Optional[Decimal] = None
    cost_basis: Optional[Decimal] = None
    purchase_date: Optional[date] = None


def _clean_description(description: Optional[str]) -> Optional[str]:
    return (description or "").strip() or None


class PortfolioService:
    """
    Service for portfolios and their holdings.

    Holdings carry a current_price/sector snapshot taken from the quote
    service when they are created and whenever refresh_prices runs.
    """

    def __init__(
        self,
        portfolio_repo: PortfolioRepository,
        holding_repo: HoldingRepository,
        quote_service: QuoteService,
    ):
        self._portfolio_repo = portfolio_repo
        self._holding_repo = holding_repo
        self._quote_service = quote_service

    # Portfolio operations

    def create_portfolio(
        self,
        name: str,
        description: Optional[str] = None,
        portfolio_type: PortfolioType = PortfolioType.PERSONAL,
    ) -> Portfolio:
        """Create a portfolio. Name must not be blank."""
        name = (name or "").strip()
        if not name:
            raise ValidationError("Portfolio name is required")

        now = now_eastern()
        portfolio = Portfolio(
            portfolio_id=str(uuid.uuid4()),
            name=name,
            description=_clean_description(description),
            portfolio_type=portfolio_type,
            created_at=now,
            updated_at=now,
        )
        return self._portfolio_repo.create(portfolio)

    def list_portfolios(self) -> list[Portfolio]:
        return self._portfolio_repo.list_all()

    def get_portfolio(self, portfolio_id: str) -> Portfolio:
        """Get a portfolio or raise NotFoundError."""
        portfolio = self._portfolio_repo.get_by_id(portfolio_id)
        if not portfolio:
            raise NotFoundError("Portfolio", portfolio_id)
        return portfolio

    def update_portfolio(
        self,
        portfolio_id: str,
        name: Optional[str] = None,
        description: Optional[str] = None,
        portfolio_type: Optional[PortfolioType] = None,
    ) -> Portfolio:
        """Apply a partial update; fields left as None are unchanged."""
        portfolio = self.get_portfolio(portfolio_id)

        if name is not None:
            name = name.strip()
            if not name:
                raise ValidationError("Portfolio name is required")
            portfolio.name = name
        if description is not None:
            portfolio.description = _clean_description(description)
        if portfolio_type is not None:
            portfolio.portfolio_type = PortfolioType(portfolio_type)

        portfolio.updated_at = now_eastern()
        return self._portfolio_repo.update(portfolio)

    def delete_portfolio(self, portfolio_id: str) -> None:
        """Delete a portfolio together with its holdings."""
        self.get_portfolio(portfolio_id)
        self._portfolio_repo.delete(portfolio_id)

    def get_portfolio_summary(self, portfolio_id: str) -> PortfolioSummaryView:
        """Portfolio with holding performance and gain/loss totals."""
        portfolio = self.get_portfolio(portfolio_id)
        holdings = self._holding_repo.list_by_portfolio(portfolio_id)
        return PortfolioSummaryView.build(portfolio, holdings)

    # Holding operations

    def create_holding(self, portfolio_id: str, data: HoldingCreate) -> Holding:
        """
        Add a holding after validating the symbol against the quote service.

        The holding starts with the quote's price and, when available, the
        company's sector.
        """
        self.get_portfolio(portfolio_id)

        symbol = normalize_symbol(data.symbol)
        if not symbol:
            raise ValidationError("Symbol is required")
        self._validate_positive(shares=data.shares, cost_basis=data.cost_basis)

        quote = self._quote_service.get_quote(symbol)
        if quote is None:
            raise ValidationError("Invalid stock symbol")

        if self._holding_repo.get_by_symbol(portfolio_id, symbol):
            raise ConflictError("Holding for this symbol already exists in this portfolio")

        company_info = self._quote_service.get_company_info(symbol)

        now = now_eastern()
        holding = Holding(
            holding_id=str(uuid.uuid4()),
            portfolio_id=portfolio_id,
            symbol=symbol,
            shares=data.shares,
            cost_basis=data.cost_basis,
            purchase_date=data.purchase_date,
            current_price=quote.price,
            sector=company_info.sector if company_info else None,
            created_at=now,
            updated_at=now,
        )
        return self._holding_repo.create(holding)

    def list_holdings(self, portfolio_id: str) -> list[Holding]:
        self.get_portfolio(portfolio_id)
        return self._holding_repo.list_by_portfolio(portfolio_id)

    def get_holding(self, portfolio_id: str, holding_id: str) -> Holding:
        """Get a holding that belongs to the given portfolio."""
        self.get_portfolio(portfolio_id)
        holding = self._holding_repo.get_by_id(holding_id)
        if not holding or holding.portfolio_id != portfolio_id:
            raise NotFoundError("Holding", holding_id)
        return holding

    def update_holding(self, portfolio_id: str, holding_id: str, data: HoldingUpdate) -> Holding:
        """Edit shares, cost basis or purchase date of a holding."""
        holding = self.get_holding(portfolio_id, holding_id)
        self._validate_positive(shares=data.shares, cost_basis=data.cost_basis)

        if data.shares is not None:
            holding.shares = data.shares
        if data.cost_basis is not None:
            holding.cost_basis = data.cost_basis
        if data.purchase_date is not None:
            holding.purchase_date = data.purchase_date

        holding.updated_at = now_eastern()
        return self._holding_repo.update(holding)

    def delete_holding(self, portfolio_id: str, holding_id: str) -> None:
        self.get_holding(portfolio_id, holding_id)
        self._holding_repo.delete(holding_id)

    # Price refresh

    def refresh_prices(self, portfolio_id: str) -> PriceRefreshResult:
        """
        Refresh current_price (and missing sectors) for every holding.

        Symbols are resolved sequentially through the quote service. Symbols
        that cannot be priced are reported in errors while the rest are still
        applied; partial success is the expected outcome.
        """
        self.get_portfolio(portfolio_id)
        holdings = self._holding_repo.list_by_portfolio(portfolio_id)
        if not holdings:
            return PriceRefreshResult(message="No holdings to update")

        symbols = list(dict.fromkeys(h.symbol for h in holdings))
        logger.info("Fetching prices for %d symbols", len(symbols))

        quotes = {q.symbol: q for q in self._quote_service.get_multiple_quotes(symbols)}
        result = PriceRefreshResult(total=len(symbols))

        for symbol in symbols:
            quote = quotes.get(symbol)
            if quote is None:
                result.errors.append(f"Failed to fetch price for {symbol}")
                continue

            symbol_holdings = [h for h in holdings if h.symbol == symbol]
            sector = self._lookup_missing_sector(symbol, symbol_holdings)
            now = now_eastern()
            for holding in symbol_holdings:
                holding.current_price = quote.price
                if not holding.sector and sector:
                    holding.sector = sector
                holding.updated_at = now
                self._holding_repo.update(holding)
            result.updated += 1

        result.message = f"Updated prices for {result.updated} symbols"
        return result

    def _lookup_missing_sector(self, symbol: str, holdings: list[Holding]) -> Optional[str]:
        """Fetch the sector once when any holding of the symbol lacks one."""
        if all(h.sector for h in holdings):
            return None
        info = self._quote_service.get_company_info(symbol)
        if info is None or not info.sector:
            logger.warning("Could not fetch sector for %s", symbol)
            return None
        return info.sector

    @staticmethod
    def _validate_positive(
        shares: Optional[Decimal] = None,
        cost_basis: Optional[Decimal] = None,
    ) -> None:
        if shares is not None and shares <= 0:
            raise ValidationError("Shares must be a positive number")
        if cost_basis is not None and cost_basis <= 0:
            raise ValidationError("Cost basis must be a positive number")
