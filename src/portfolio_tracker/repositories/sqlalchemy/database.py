"""Database engine and session management."""

from typing import Generator, Optional

from sqlalchemy import create_engine, Engine
from sqlalchemy.orm import sessionmaker, Session, declarative_base

from portfolio_tracker.config.settings import get_settings

Base = declarative_base()

# Built lazily from settings; reset_database() drops them
_engine: Optional[Engine] = None
_SessionLocal: Optional[sessionmaker] = None


def _create_engine(database_url: str) -> Engine:
    # Request handlers run in a threadpool and share SQLite connections
    connect_args = {"check_same_thread": False} if database_url.startswith("sqlite") else {}
    return create_engine(database_url, connect_args=connect_args, echo=False)


def get_engine() -> Engine:
    """Get or create the engine for the configured database URL."""
    global _engine
    if _engine is None:
        _engine = _create_engine(get_settings().get_database_url())
    return _engine


def get_session_factory() -> sessionmaker:
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=get_engine())
    return _SessionLocal


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency yielding one session per request."""
    db = get_session_factory()()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Create the portfolios, holdings and price_cache tables if missing."""
    from portfolio_tracker.repositories.sqlalchemy import orm_models  # noqa: F401

    Base.metadata.create_all(bind=get_engine())


def reset_database() -> None:
    """Dispose the engine so the next call rebuilds it from settings."""
    global _engine, _SessionLocal

    if _engine is not None:
        _engine.dispose()
    _engine = None
    _SessionLocal = None
