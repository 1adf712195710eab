"""Alpha Vantage quote provider with static fallback."""

import logging
import time
from datetime import datetime
from decimal import Decimal
from typing import Any, Callable, Optional

import requests

from portfolio_tracker.config.settings import ALPHA_VANTAGE_URL, Settings
from portfolio_tracker.core.timezone import now_eastern, parse_trading_day
from portfolio_tracker.domain.models import (
    CompanyInfo,
    Quote,
    QuoteLookup,
    QuoteSource,
    SymbolMatch,
    normalize_symbol,
)
from portfolio_tracker.providers.static_data import (
    static_company_info,
    static_quote,
    static_search,
)

logger = logging.getLogger(__name__)

MAX_SEARCH_RESULTS = 10

# Presence of any of these keys means the call did not succeed
_ERROR_KEYS = ("Note", "Information", "Error Message")

_PARSE_ERRORS = (KeyError, TypeError, ValueError, ArithmeticError)


def parse_percent(value: str) -> Decimal:
    """Parse an upstream percent string such as "1.24%" into Decimal("1.24")."""
    return Decimal(value.strip().rstrip("%").strip())


def _optional_int(value: Any) -> Optional[int]:
    if value in (None, "", "None"):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


class AlphaVantageQuoteProvider:
    """
    Quote provider backed by the Alpha Vantage query API.

    Without an API key the provider never goes to the network and answers
    from the static table. With a key, transport errors, non-2xx responses,
    rate-limit notes and malformed fields all fall back to the static table.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: str = ALPHA_VANTAGE_URL,
        timeout_seconds: float = 10.0,
        request_delay_seconds: float = 12.0,
        session: Optional[requests.Session] = None,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], datetime] = now_eastern,
    ):
        self._api_key = api_key or None
        self._base_url = base_url
        self._timeout = timeout_seconds
        self._request_delay = request_delay_seconds
        self._session = session
        self._owns_session = session is None
        self._sleep = sleep
        self._clock = clock

        if not self.is_live:
            logger.info("No Alpha Vantage API key configured, using static quotes")

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> "AlphaVantageQuoteProvider":
        """Build a provider from application settings."""
        return cls(
            api_key=settings.alpha_vantage_api_key,
            base_url=settings.alpha_vantage_base_url,
            timeout_seconds=settings.alpha_vantage_timeout_seconds,
            request_delay_seconds=settings.quote_request_delay_seconds,
            **kwargs,
        )

    @property
    def is_live(self) -> bool:
        return self._api_key is not None

    def wait_between_requests(self) -> None:
        """Sleep for the configured delay between consecutive live calls."""
        if self.is_live and self._request_delay > 0:
            self._sleep(self._request_delay)

    def get_quote(self, symbol: str) -> QuoteLookup:
        """Look up a single quote, falling back to static data on failure."""
        symbol = normalize_symbol(symbol)
        if not symbol:
            return QuoteLookup(symbol=symbol, source=QuoteSource.NOT_FOUND)
        if not self.is_live:
            return self._static_lookup(symbol, miss=QuoteSource.NOT_FOUND)

        payload = self._fetch("GLOBAL_QUOTE", symbol=symbol)
        if payload is None:
            return self._static_lookup(symbol, miss=QuoteSource.UNAVAILABLE)

        raw = payload.get("Global Quote")
        if not isinstance(raw, dict) or not raw.get("05. price"):
            logger.warning("No quote data found for symbol: %s", symbol)
            return QuoteLookup(symbol=symbol, source=QuoteSource.NOT_FOUND)

        try:
            quote = self._parse_global_quote(raw, symbol)
        except _PARSE_ERRORS as exc:
            logger.warning("Malformed quote for %s: %s", symbol, exc)
            return self._static_lookup(symbol, miss=QuoteSource.UNAVAILABLE)

        return QuoteLookup(symbol=quote.symbol, source=QuoteSource.LIVE, quote=quote)

    def get_multiple_quotes(self, symbols: list[str]) -> list[Quote]:
        """
        Fetch quotes one at a time in input order.

        A fixed delay separates consecutive live calls to respect the upstream
        rate limit; this must stay sequential. Symbols that resolve to nothing
        are omitted, so callers diff the result against their request.
        """
        quotes: list[Quote] = []
        for index, symbol in enumerate(symbols):
            if index > 0:
                self.wait_between_requests()
            lookup = self.get_quote(symbol)
            if lookup.quote is not None:
                quotes.append(lookup.quote)
        return quotes

    def get_company_info(self, symbol: str) -> Optional[CompanyInfo]:
        """Look up company classification, falling back to static data."""
        symbol = normalize_symbol(symbol)
        if not symbol:
            return None
        if not self.is_live:
            return static_company_info(symbol)

        payload = self._fetch("OVERVIEW", symbol=symbol)
        if payload is None or not payload.get("Symbol"):
            return static_company_info(symbol)

        return CompanyInfo(
            symbol=normalize_symbol(payload["Symbol"]),
            name=payload.get("Name") or symbol,
            sector=payload.get("Sector") or "Unknown",
            industry=payload.get("Industry") or "Unknown",
            market_cap=_optional_int(payload.get("MarketCapitalization")),
        )

    def search_symbols(self, query: str) -> list[SymbolMatch]:
        """Search by ticker or company name; at most 10 results."""
        query = (query or "").strip()
        if not query:
            return []
        if not self.is_live:
            return static_search(query, limit=MAX_SEARCH_RESULTS)

        payload = self._fetch("SYMBOL_SEARCH", keywords=query)
        if payload is None:
            return static_search(query, limit=MAX_SEARCH_RESULTS)

        try:
            matches = payload.get("bestMatches") or []
            return [
                SymbolMatch(symbol=match["1. symbol"], name=match["2. name"])
                for match in matches[:MAX_SEARCH_RESULTS]
            ]
        except _PARSE_ERRORS as exc:
            logger.warning("Malformed search results for %r: %s", query, exc)
            return static_search(query, limit=MAX_SEARCH_RESULTS)

    def validate_symbol(self, symbol: str) -> bool:
        """True iff a quote can be found for the symbol."""
        return self.get_quote(symbol).found

    def _static_lookup(self, symbol: str, miss: QuoteSource) -> QuoteLookup:
        quote = static_quote(symbol, as_of=self._clock())
        if quote is None:
            return QuoteLookup(symbol=symbol, source=miss)
        return QuoteLookup(symbol=symbol, source=QuoteSource.STATIC_FALLBACK, quote=quote)

    def close(self) -> None:
        """Close the HTTP session if this provider opened it."""
        if self._owns_session and self._session is not None:
            self._session.close()
        self._session = None

    def _get_session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
        return self._session

    def _fetch(self, function: str, **params: str) -> Optional[dict]:
        """Call the query API; None on any transport, HTTP or upstream error."""
        query = {"function": function, **params, "apikey": self._api_key}
        try:
            response = self._get_session().get(self._base_url, params=query, timeout=self._timeout)
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as exc:
            logger.warning("Alpha Vantage %s request failed: %s", function, exc)
            return None

        if not isinstance(payload, dict):
            logger.warning("Alpha Vantage %s returned unexpected payload", function)
            return None
        for key in _ERROR_KEYS:
            if key in payload:
                logger.warning("Alpha Vantage %s error: %s", function, payload[key])
                return None
        return payload

    def _parse_global_quote(self, raw: dict, symbol: str) -> Quote:
        # Cache and refresh key on the requested symbol; "01. symbol" may differ (BRK-B for BRK.B)
        return Quote(
            symbol=symbol,
            price=Decimal(raw["05. price"]),
            change=Decimal(raw["09. change"]),
            change_percent=parse_percent(raw["10. change percent"]),
            volume=int(raw["06. volume"]),
            last_updated=self._clock(),
            latest_trading_day=parse_trading_day(raw["07. latest trading day"]),
        )
