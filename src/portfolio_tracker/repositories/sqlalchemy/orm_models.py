"""SQLAlchemy ORM model definitions."""

from sqlalchemy import (
    BigInteger,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Numeric,
    String,
    Text,
    UniqueConstraint,
    Enum as SqlEnum,
)
from sqlalchemy.orm import relationship

from portfolio_tracker.repositories.sqlalchemy.database import Base
from portfolio_tracker.domain.models.enums import PortfolioType


class PortfolioORM(Base):
    """SQLAlchemy model for Portfolio."""

    __tablename__ = "portfolios"

    portfolio_id = Column(String(36), primary_key=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    portfolio_type = Column(
        SqlEnum(PortfolioType),
        default=PortfolioType.PERSONAL,
        nullable=False,
    )
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    holdings = relationship(
        "HoldingORM",
        back_populates="portfolio",
        cascade="all, delete-orphan",
    )


class HoldingORM(Base):
    """SQLAlchemy model for Holding."""

    __tablename__ = "holdings"
    __table_args__ = (
        UniqueConstraint("portfolio_id", "symbol", name="uq_holdings_portfolio_symbol"),
    )

    holding_id = Column(String(36), primary_key=True)
    portfolio_id = Column(String(36), ForeignKey("portfolios.portfolio_id"), nullable=False)
    symbol = Column(String(20), nullable=False)
    shares = Column(Numeric(precision=18, scale=8), nullable=False)
    cost_basis = Column(Numeric(precision=18, scale=4), nullable=False)
    purchase_date = Column(Date, nullable=False)
    current_price = Column(Numeric(precision=18, scale=4), nullable=True)
    sector = Column(String(100), nullable=True)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    portfolio = relationship("PortfolioORM", back_populates="holdings")


class PriceCacheORM(Base):
    """SQLAlchemy model for the last fetched quote per symbol."""

    __tablename__ = "price_cache"

    symbol = Column(String(20), primary_key=True)
    price = Column(Numeric(precision=18, scale=4), nullable=False)
    change = Column(Numeric(precision=18, scale=4), nullable=False)
    change_percent = Column(Numeric(precision=10, scale=4), nullable=False)
    volume = Column(BigInteger, nullable=False)
    last_updated = Column(DateTime, nullable=False)
    latest_trading_day = Column(Date, nullable=True)
