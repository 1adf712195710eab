"""Core utilities and shared functionality."""

from portfolio_tracker.core.timezone import (
    now_eastern,
    to_eastern,
    parse_trading_day,
    EASTERN_TZ,
)
from portfolio_tracker.core.exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    ConflictError,
)

__all__ = [
    "now_eastern",
    "to_eastern",
    "parse_trading_day",
    "EASTERN_TZ",
    "AppError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
]
