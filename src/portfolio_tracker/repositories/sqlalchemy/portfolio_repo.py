"""SQLAlchemy implementation of PortfolioRepository."""

from typing import Optional

from sqlalchemy.orm import Session

from portfolio_tracker.domain.models import Portfolio
from portfolio_tracker.repositories.sqlalchemy.orm_models import PortfolioORM


class SqlAlchemyPortfolioRepository:
    """SQLAlchemy-backed portfolio repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, portfolio: Portfolio) -> Portfolio:
        """Persist a new portfolio."""
        orm_portfolio = PortfolioORM(
            portfolio_id=portfolio.portfolio_id,
            name=portfolio.name,
            description=portfolio.description,
            portfolio_type=portfolio.portfolio_type,
            created_at=portfolio.created_at,
            updated_at=portfolio.updated_at,
        )
        self._db.add(orm_portfolio)
        self._db.commit()
        self._db.refresh(orm_portfolio)
        return self._to_domain(orm_portfolio)

    def get_by_id(self, portfolio_id: str) -> Optional[Portfolio]:
        """Retrieve portfolio by ID."""
        orm_portfolio = self._db.query(PortfolioORM).filter(
            PortfolioORM.portfolio_id == portfolio_id
        ).first()
        return self._to_domain(orm_portfolio) if orm_portfolio else None

    def list_all(self) -> list[Portfolio]:
        """List all portfolios, newest first."""
        orm_portfolios = (
            self._db.query(PortfolioORM)
            .order_by(PortfolioORM.created_at.desc(), PortfolioORM.name)
            .all()
        )
        return [self._to_domain(p) for p in orm_portfolios]

    def update(self, portfolio: Portfolio) -> Portfolio:
        """Update an existing portfolio."""
        orm_portfolio = self._db.query(PortfolioORM).filter(
            PortfolioORM.portfolio_id == portfolio.portfolio_id
        ).first()
        if orm_portfolio:
            orm_portfolio.name = portfolio.name
            orm_portfolio.description = portfolio.description
            orm_portfolio.portfolio_type = portfolio.portfolio_type
            orm_portfolio.updated_at = portfolio.updated_at
            self._db.commit()
            self._db.refresh(orm_portfolio)
            return self._to_domain(orm_portfolio)
        raise ValueError(f"Portfolio not found: {portfolio.portfolio_id}")

    def delete(self, portfolio_id: str) -> None:
        """Delete a portfolio and its holdings."""
        orm_portfolio = self._db.query(PortfolioORM).filter(
            PortfolioORM.portfolio_id == portfolio_id
        ).first()
        if orm_portfolio:
            # ORM delete so the relationship cascade removes holdings
            self._db.delete(orm_portfolio)
            self._db.commit()

    @staticmethod
    def _to_domain(orm: PortfolioORM) -> Portfolio:
        """Convert ORM model to domain model."""
        return Portfolio(
            portfolio_id=orm.portfolio_id,
            name=orm.name,
            description=orm.description,
            portfolio_type=orm.portfolio_type,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )
