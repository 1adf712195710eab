"""SQLAlchemy repository implementations."""

from portfolio_tracker.repositories.sqlalchemy.database import (
    get_engine,
    get_session_factory,
    get_db,
    init_db,
    reset_database,
    Base,
)
from portfolio_tracker.repositories.sqlalchemy.portfolio_repo import SqlAlchemyPortfolioRepository
from portfolio_tracker.repositories.sqlalchemy.holding_repo import SqlAlchemyHoldingRepository
from portfolio_tracker.repositories.sqlalchemy.quote_cache import SqlAlchemyQuoteCache

__all__ = [
    "get_engine",
    "get_session_factory",
    "get_db",
    "init_db",
    "reset_database",
    "Base",
    "SqlAlchemyPortfolioRepository",
    "SqlAlchemyHoldingRepository",
    "SqlAlchemyQuoteCache",
]
