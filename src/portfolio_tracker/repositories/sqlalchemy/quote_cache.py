"""SQLAlchemy implementation of QuoteCache."""

import logging
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Callable, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from portfolio_tracker.core.timezone import now_eastern, to_eastern
from portfolio_tracker.domain.models import Quote, normalize_symbol
from portfolio_tracker.repositories.protocols.quote_cache import is_fresh
from portfolio_tracker.repositories.sqlalchemy.orm_models import PriceCacheORM

logger = logging.getLogger(__name__)


class SqlAlchemyQuoteCache:
    """
    Quote cache persisted in the price_cache table, one row per symbol.

    Every database error is logged and rolled back; reads then behave as a
    miss and writes are dropped, so the quote pipeline never blocks on storage.
    """

    def __init__(
        self,
        db: Session,
        expiry_minutes: float = 5,
        clock: Callable[[], datetime] = now_eastern,
    ):
        self._db = db
        self._expiry = timedelta(minutes=expiry_minutes)
        self._clock = clock

    def get(self, symbol: str) -> Optional[Quote]:
        """Return the cached quote if present and fresh."""
        key = normalize_symbol(symbol)
        try:
            orm_quote = (
                self._db.query(PriceCacheORM)
                .filter(PriceCacheORM.symbol == key)
                .first()
            )
            if orm_quote is None:
                return None
            quote = self._to_domain(orm_quote)
        except (SQLAlchemyError, ValueError, ArithmeticError) as exc:
            self._db.rollback()
            logger.warning("Error reading cached price for %s: %s", key, exc)
            return None

        if not is_fresh(quote.last_updated, self._clock(), self._expiry):
            return None
        return quote

    def get_many(self, symbols: list[str]) -> dict[str, Quote]:
        """Return fresh cached quotes keyed by upper-cased symbol."""
        result: dict[str, Quote] = {}
        for symbol in symbols:
            quote = self.get(symbol)
            if quote is not None:
                result[quote.symbol] = quote
        return result

    def put(self, quote: Quote) -> None:
        """Insert or overwrite the entry for quote.symbol."""
        key = normalize_symbol(quote.symbol)
        try:
            orm_quote = (
                self._db.query(PriceCacheORM)
                .filter(PriceCacheORM.symbol == key)
                .first()
            )
            if orm_quote is None:
                orm_quote = PriceCacheORM(symbol=key)
                self._db.add(orm_quote)

            orm_quote.price = quote.price
            orm_quote.change = quote.change
            orm_quote.change_percent = quote.change_percent
            orm_quote.volume = quote.volume
            orm_quote.last_updated = to_eastern(quote.last_updated).replace(tzinfo=None)
            orm_quote.latest_trading_day = quote.latest_trading_day
            self._db.commit()
        except SQLAlchemyError as exc:
            self._db.rollback()
            logger.warning("Error caching price for %s: %s", key, exc)

    def invalidate(self, symbol: str) -> None:
        """Remove the entry for one symbol."""
        key = normalize_symbol(symbol)
        try:
            self._db.query(PriceCacheORM).filter(PriceCacheORM.symbol == key).delete()
            self._db.commit()
        except SQLAlchemyError as exc:
            self._db.rollback()
            logger.warning("Error clearing cached price for %s: %s", key, exc)

    def invalidate_all(self) -> None:
        """Remove every entry."""
        try:
            self._db.query(PriceCacheORM).delete()
            self._db.commit()
        except SQLAlchemyError as exc:
            self._db.rollback()
            logger.warning("Error clearing price cache: %s", exc)

    @staticmethod
    def _to_domain(orm: PriceCacheORM) -> Quote:
        """Convert ORM row to domain quote."""
        return Quote(
            symbol=orm.symbol,
            price=Decimal(str(orm.price)),
            change=Decimal(str(orm.change)),
            change_percent=Decimal(str(orm.change_percent)),
            volume=int(orm.volume),
            # SQLite drops tzinfo; stored wall time is Eastern
            last_updated=to_eastern(orm.last_updated),
            latest_trading_day=orm.latest_trading_day,
        )
