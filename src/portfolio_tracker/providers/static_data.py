"""Static quotes and company data used when no live source is configured or reachable."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from portfolio_tracker.domain.models import CompanyInfo, Quote, SymbolMatch, normalize_symbol

# symbol -> (price, change, change percent, volume)
_STATIC_QUOTES: dict[str, tuple[Decimal, Decimal, Decimal, int]] = {
    "AAPL": (Decimal("175.25"), Decimal("2.15"), Decimal("1.24"), 65432100),
    "GOOGL": (Decimal("2845.75"), Decimal("-15.25"), Decimal("-0.53"), 1234567),
    "TSLA": (Decimal("245.80"), Decimal("8.25"), Decimal("3.48"), 45678901),
    "MSFT": (Decimal("415.60"), Decimal("5.40"), Decimal("1.32"), 23456789),
    "NVDA": (Decimal("875.45"), Decimal("12.75"), Decimal("1.48"), 34567890),
    "META": (Decimal("485.20"), Decimal("-8.30"), Decimal("-1.68"), 18765432),
    "AMZN": (Decimal("165.75"), Decimal("3.25"), Decimal("2.00"), 41234567),
    "NFLX": (Decimal("425.80"), Decimal("-2.45"), Decimal("-0.57"), 8765432),
    "SPY": (Decimal("485.60"), Decimal("1.85"), Decimal("0.38"), 78901234),
    "QQQ": (Decimal("395.40"), Decimal("2.20"), Decimal("0.56"), 56789012),
    "F": (Decimal("11.25"), Decimal("0.15"), Decimal("1.35"), 89012345),
    "GM": (Decimal("38.75"), Decimal("-0.85"), Decimal("-2.15"), 12345678),
}

# symbol -> (name, sector, industry)
_STATIC_COMPANIES: dict[str, tuple[str, str, str]] = {
    "AAPL": ("Apple Inc.", "Technology", "Consumer Electronics"),
    "GOOGL": ("Alphabet Inc.", "Technology", "Internet Content & Information"),
    "TSLA": ("Tesla Inc.", "Consumer Discretionary", "Auto Manufacturers"),
    "MSFT": ("Microsoft Corporation", "Technology", "Software"),
    "NVDA": ("NVIDIA Corporation", "Technology", "Semiconductors"),
    "META": ("Meta Platforms Inc.", "Technology", "Internet Content & Information"),
    "AMZN": ("Amazon.com Inc.", "Consumer Discretionary", "Internet Retail"),
    "NFLX": ("Netflix Inc.", "Communication Services", "Entertainment"),
    "SPY": ("SPDR S&P 500 ETF Trust", "ETF", "Exchange Traded Fund"),
    "QQQ": ("Invesco QQQ Trust", "ETF", "Exchange Traded Fund"),
    "F": ("Ford Motor Company", "Consumer Discretionary", "Auto Manufacturers"),
    "GM": ("General Motors Company", "Consumer Discretionary", "Auto Manufacturers"),
}

STATIC_SYMBOLS: tuple[str, ...] = tuple(_STATIC_QUOTES)


def static_quote(symbol: str, as_of: datetime) -> Optional[Quote]:
    """Return the static quote for a symbol stamped with as_of, or None if unknown."""
    key = normalize_symbol(symbol)
    data = _STATIC_QUOTES.get(key)
    if data is None:
        return None
    price, change, change_percent, volume = data
    return Quote(
        symbol=key,
        price=price,
        change=change,
        change_percent=change_percent,
        volume=volume,
        last_updated=as_of,
    )


def static_company_info(symbol: str) -> Optional[CompanyInfo]:
    """Return static company info for a symbol, or None if unknown."""
    key = normalize_symbol(symbol)
    data = _STATIC_COMPANIES.get(key)
    if data is None:
        return None
    name, sector, industry = data
    return CompanyInfo(symbol=key, name=name, sector=sector, industry=industry)


def static_search(query: str, limit: int = 10) -> list[SymbolMatch]:
    """Case-insensitive substring match on symbol or company name."""
    term = (query or "").strip().lower()
    if not term:
        return []
    matches = [
        SymbolMatch(symbol=symbol, name=name)
        for symbol, (name, _, _) in _STATIC_COMPANIES.items()
        if term in symbol.lower() or term in name.lower()
    ]
    return matches[:limit]
