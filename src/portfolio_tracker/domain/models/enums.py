"""Enumerations for domain models."""

from enum import Enum


class PortfolioType(str, Enum):
    """Kinds of portfolio a user can create."""

    PERSONAL = "PERSONAL"
    RETIREMENT = "RETIREMENT"
    TAXABLE = "TAXABLE"
    OTHER = "OTHER"


class QuoteSource(str, Enum):
    """Where a quote lookup was answered from."""

    LIVE = "LIVE"
    CACHED = "CACHED"
    STATIC_FALLBACK = "STATIC_FALLBACK"
    NOT_FOUND = "NOT_FOUND"  # upstream (or static table) does not know the symbol
    UNAVAILABLE = "UNAVAILABLE"  # upstream failed and no static data exists
