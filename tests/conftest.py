"""
Pytest configuration and fixtures for portfolio tracker tests.

This module provides:
- In-memory SQLite database fixtures
- A controllable clock and a recording sleep
- Mocked Alpha Vantage HTTP sessions
- Service and repository fixtures
- FastAPI test client wired to the test database
"""

from datetime import datetime, timedelta
from decimal import Decimal
from typing import Callable, Optional
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker, Session
from fastapi.testclient import TestClient

from portfolio_tracker.main import app
from portfolio_tracker.api.deps import get_quote_provider, reset_quote_provider
from portfolio_tracker.config.settings import Settings, reset_settings, set_settings
from portfolio_tracker.repositories.sqlalchemy.database import Base, get_db, reset_database
# Import ORM models to register them with Base before creating tables
from portfolio_tracker.repositories.sqlalchemy import orm_models  # noqa: F401
from portfolio_tracker.repositories.sqlalchemy import (
    SqlAlchemyHoldingRepository,
    SqlAlchemyPortfolioRepository,
    SqlAlchemyQuoteCache,
)
from portfolio_tracker.repositories.memory import InMemoryQuoteCache
from portfolio_tracker.providers import AlphaVantageQuoteProvider
from portfolio_tracker.services import PortfolioService, QuoteService
from portfolio_tracker.domain.models import Holding, Portfolio, PortfolioType
from portfolio_tracker.core.timezone import EASTERN_TZ


# =============================================================================
# TIME HELPERS
# =============================================================================


def eastern_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 10,
    minute: int = 0,
    second: int = 0,
) -> datetime:
    """Create a localized datetime in US/Eastern timezone."""
    return EASTERN_TZ.localize(datetime(year, month, day, hour, minute, second))


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


class RecordingSleep:
    """Stand-in for time.sleep that records requested delays."""

    def __init__(self, events: Optional[list] = None):
        self.calls: list[float] = []
        self._events = events

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)
        if self._events is not None:
            self._events.append(("sleep", seconds))


@pytest.fixture
def fixed_now() -> datetime:
    """Fixed 'now' timestamp for deterministic tests."""
    return eastern_datetime(2024, 6, 15, 14, 30, 0)


@pytest.fixture
def clock(fixed_now) -> FakeClock:
    return FakeClock(fixed_now)


@pytest.fixture
def sleep() -> RecordingSleep:
    return RecordingSleep()


# =============================================================================
# ALPHA VANTAGE HTTP HELPERS
# =============================================================================


def make_response(payload=None, status_error: Optional[Exception] = None) -> MagicMock:
    """Build a mocked requests.Response returning payload from .json()."""
    response = MagicMock()
    response.json.return_value = payload
    if status_error is not None:
        response.raise_for_status.side_effect = status_error
    return response


def global_quote_payload(
    symbol: str = "IBM",
    price: str = "185.5000",
    change: str = "1.2500",
    change_percent: str = "0.6784%",
    volume: str = "4123456",
    trading_day: str = "2024-06-14",
) -> dict:
    """GLOBAL_QUOTE response body in Alpha Vantage's labeled-field layout."""
    return {
        "Global Quote": {
            "01. symbol": symbol,
            "02. open": price,
            "03. high": price,
            "04. low": price,
            "05. price": price,
            "06. volume": volume,
            "07. latest trading day": trading_day,
            "08. previous close": price,
            "09. change": change,
            "10. change percent": change_percent,
        }
    }


def quote_session(
    prices: dict[str, str],
    events: Optional[list] = None,
) -> MagicMock:
    """
    Mocked requests.Session answering GLOBAL_QUOTE for the given symbols.

    Unknown symbols get an empty "Global Quote", which is how the upstream
    reports a symbol it does not know.
    """

    def _get(url, params=None, timeout=None):
        symbol = params.get("symbol", "")
        if events is not None:
            events.append(("get", symbol))
        if symbol in prices:
            return make_response(global_quote_payload(symbol, price=prices[symbol]))
        return make_response({"Global Quote": {}})

    session = MagicMock()
    session.get.side_effect = _get
    return session


@pytest.fixture
def live_session() -> MagicMock:
    return quote_session({"IBM": "185.5000", "AAPL": "190.1000", "MSFT": "420.0000"})


@pytest.fixture
def make_live_provider(clock, sleep) -> Callable[..., AlphaVantageQuoteProvider]:
    """Factory for a keyed provider talking to a mocked session."""

    def _make(session: MagicMock, **kwargs) -> AlphaVantageQuoteProvider:
        kwargs.setdefault("sleep", sleep)
        kwargs.setdefault("clock", clock)
        return AlphaVantageQuoteProvider(api_key="test-key", session=session, **kwargs)

    return _make


@pytest.fixture
def live_provider(make_live_provider, live_session) -> AlphaVantageQuoteProvider:
    return make_live_provider(live_session)


@pytest.fixture
def static_provider(clock) -> AlphaVantageQuoteProvider:
    """Provider without an API key (static quotes only)."""
    return AlphaVantageQuoteProvider(api_key=None, clock=clock)


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    reset_settings()

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def test_session(test_engine) -> Session:
    """Create test database session."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


# =============================================================================
# REPOSITORY FIXTURES
# =============================================================================


@pytest.fixture
def portfolio_repo(test_session) -> SqlAlchemyPortfolioRepository:
    return SqlAlchemyPortfolioRepository(test_session)


@pytest.fixture
def holding_repo(test_session) -> SqlAlchemyHoldingRepository:
    return SqlAlchemyHoldingRepository(test_session)


@pytest.fixture
def sql_quote_cache(test_session, clock) -> SqlAlchemyQuoteCache:
    return SqlAlchemyQuoteCache(test_session, expiry_minutes=5, clock=clock)


@pytest.fixture
def memory_cache(clock) -> InMemoryQuoteCache:
    return InMemoryQuoteCache(expiry_minutes=5, clock=clock)


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def quote_service(static_provider, memory_cache) -> QuoteService:
    """QuoteService answering from the static table."""
    return QuoteService(provider=static_provider, cache=memory_cache)


@pytest.fixture
def portfolio_service(portfolio_repo, holding_repo, quote_service) -> PortfolioService:
    return PortfolioService(
        portfolio_repo=portfolio_repo,
        holding_repo=holding_repo,
        quote_service=quote_service,
    )


# =============================================================================
# FACTORY FIXTURES
# =============================================================================


@pytest.fixture
def portfolio_factory(portfolio_service) -> Callable[..., Portfolio]:
    def _create_portfolio(
        name: str = "Growth",
        portfolio_type: PortfolioType = PortfolioType.PERSONAL,
        description: Optional[str] = None,
    ) -> Portfolio:
        return portfolio_service.create_portfolio(
            name=name,
            description=description,
            portfolio_type=portfolio_type,
        )

    return _create_portfolio


@pytest.fixture
def raw_holding_factory(holding_repo, fixed_now) -> Callable[..., Holding]:
    """Insert a holding directly, bypassing symbol validation."""
    counter = {"n": 0}

    def _create_holding(
        portfolio_id: str,
        symbol: str,
        shares: str = "10",
        cost_basis: str = "100",
        current_price: Optional[str] = None,
        sector: Optional[str] = None,
    ) -> Holding:
        counter["n"] += 1
        return holding_repo.create(
            Holding(
                holding_id=f"hold-{counter['n']:03d}",
                portfolio_id=portfolio_id,
                symbol=symbol,
                shares=Decimal(shares),
                cost_basis=Decimal(cost_basis),
                purchase_date=fixed_now.date(),
                current_price=Decimal(current_price) if current_price is not None else None,
                sector=sector,
                created_at=fixed_now,
                updated_at=fixed_now,
            )
        )

    return _create_holding


# =============================================================================
# API CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def client(test_engine, clock) -> TestClient:
    """Provide FastAPI test client with test database and static quotes."""
    set_settings(Settings(_env_file=None, database_url="sqlite:///:memory:"))
    reset_database()
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

    def override_get_db():
        session = TestSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_quote_provider] = lambda: AlphaVantageQuoteProvider(
        api_key=None, clock=clock
    )
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    reset_quote_provider()
    reset_database()
    reset_settings()
