"""Dependency injection for FastAPI."""

from typing import Optional

from fastapi import Depends
from sqlalchemy.orm import Session

from portfolio_tracker.config.settings import Settings, get_settings
from portfolio_tracker.providers import AlphaVantageQuoteProvider, QuoteProvider
from portfolio_tracker.repositories.sqlalchemy.database import get_db
from portfolio_tracker.repositories.sqlalchemy import (
    SqlAlchemyHoldingRepository,
    SqlAlchemyPortfolioRepository,
    SqlAlchemyQuoteCache,
)
from portfolio_tracker.services import PortfolioService, QuoteService


def get_portfolio_repo(db: Session = Depends(get_db)) -> SqlAlchemyPortfolioRepository:
    """Provide PortfolioRepository instance."""
    return SqlAlchemyPortfolioRepository(db)


def get_holding_repo(db: Session = Depends(get_db)) -> SqlAlchemyHoldingRepository:
    """Provide HoldingRepository instance."""
    return SqlAlchemyHoldingRepository(db)


def get_quote_cache(db: Session = Depends(get_db)) -> SqlAlchemyQuoteCache:
    """Provide QuoteCache instance backed by the price_cache table."""
    return SqlAlchemyQuoteCache(
        db,
        expiry_minutes=get_settings().quote_cache_expiry_minutes,
    )


# One provider per settings instance; rebuilt after set_settings/reset_settings
_quote_provider: Optional[AlphaVantageQuoteProvider] = None
_quote_provider_settings: Optional[Settings] = None


def get_quote_provider() -> QuoteProvider:
    """Provide the shared QuoteProvider (static-only when no API key is set)."""
    global _quote_provider, _quote_provider_settings
    settings = get_settings()
    if _quote_provider is None or _quote_provider_settings is not settings:
        reset_quote_provider()
        _quote_provider = AlphaVantageQuoteProvider.from_settings(settings)
        _quote_provider_settings = settings
    return _quote_provider


def reset_quote_provider() -> None:
    """Close and drop the shared provider."""
    global _quote_provider, _quote_provider_settings
    if _quote_provider is not None:
        _quote_provider.close()
    _quote_provider = None
    _quote_provider_settings = None


def get_quote_service(
    provider: QuoteProvider = Depends(get_quote_provider),
    cache: SqlAlchemyQuoteCache = Depends(get_quote_cache),
) -> QuoteService:
    """Provide QuoteService instance."""
    return QuoteService(provider=provider, cache=cache)


def get_portfolio_service(
    portfolio_repo: SqlAlchemyPortfolioRepository = Depends(get_portfolio_repo),
    holding_repo: SqlAlchemyHoldingRepository = Depends(get_holding_repo),
    quote_service: QuoteService = Depends(get_quote_service),
) -> PortfolioService:
    """Provide PortfolioService instance."""
    return PortfolioService(
        portfolio_repo=portfolio_repo,
        holding_repo=holding_repo,
        quote_service=quote_service,
    )
