"""SQLAlchemy implementation of HoldingRepository."""

from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from portfolio_tracker.domain.models import Holding
from portfolio_tracker.repositories.sqlalchemy.orm_models import HoldingORM


class SqlAlchemyHoldingRepository:
    """SQLAlchemy-backed holding repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, holding: Holding) -> Holding:
        """Persist a new holding."""
        orm_holding = HoldingORM(
            holding_id=holding.holding_id,
            portfolio_id=holding.portfolio_id,
            symbol=holding.symbol,
            shares=holding.shares,
            cost_basis=holding.cost_basis,
            purchase_date=holding.purchase_date,
            current_price=holding.current_price,
            sector=holding.sector,
            created_at=holding.created_at,
            updated_at=holding.updated_at,
        )
        self._db.add(orm_holding)
        self._db.commit()
        self._db.refresh(orm_holding)
        return self._to_domain(orm_holding)

    def get_by_id(self, holding_id: str) -> Optional[Holding]:
        """Retrieve holding by ID."""
        orm_holding = self._db.query(HoldingORM).filter(
            HoldingORM.holding_id == holding_id
        ).first()
        return self._to_domain(orm_holding) if orm_holding else None

    def get_by_symbol(self, portfolio_id: str, symbol: str) -> Optional[Holding]:
        """Retrieve the holding for a symbol within a portfolio."""
        orm_holding = (
            self._db.query(HoldingORM)
            .filter(
                HoldingORM.portfolio_id == portfolio_id,
                HoldingORM.symbol == symbol,
            )
            .first()
        )
        return self._to_domain(orm_holding) if orm_holding else None

    def list_by_portfolio(self, portfolio_id: str) -> list[Holding]:
        """List holdings of a portfolio ordered by symbol."""
        orm_holdings = (
            self._db.query(HoldingORM)
            .filter(HoldingORM.portfolio_id == portfolio_id)
            .order_by(HoldingORM.symbol)
            .all()
        )
        return [self._to_domain(h) for h in orm_holdings]

    def update(self, holding: Holding) -> Holding:
        """Update an existing holding."""
        orm_holding = self._db.query(HoldingORM).filter(
            HoldingORM.holding_id == holding.holding_id
        ).first()
        if orm_holding:
            orm_holding.shares = holding.shares
            orm_holding.cost_basis = holding.cost_basis
            orm_holding.purchase_date = holding.purchase_date
            orm_holding.current_price = holding.current_price
            orm_holding.sector = holding.sector
            orm_holding.updated_at = holding.updated_at
            self._db.commit()
            self._db.refresh(orm_holding)
            return self._to_domain(orm_holding)
        raise ValueError(f"Holding not found: {holding.holding_id}")

    def delete(self, holding_id: str) -> None:
        """Delete a holding."""
        self._db.query(HoldingORM).filter(
            HoldingORM.holding_id == holding_id
        ).delete()
        self._db.commit()

    @staticmethod
    def _to_domain(orm: HoldingORM) -> Holding:
        """Convert ORM model to domain model."""
        return Holding(
            holding_id=orm.holding_id,
            portfolio_id=orm.portfolio_id,
            symbol=orm.symbol,
            shares=Decimal(str(orm.shares)),
            cost_basis=Decimal(str(orm.cost_basis)),
            purchase_date=orm.purchase_date,
            current_price=Decimal(str(orm.current_price)) if orm.current_price is not None else None,
            sector=orm.sector,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )
