"""Timezone utilities for US/Eastern market time."""

from datetime import date, datetime
from typing import Optional

import pytz
from dateutil import parser as date_parser

EASTERN_TZ = pytz.timezone("US/Eastern")


def now_eastern() -> datetime:
    """Return current time in US/Eastern timezone."""
    return datetime.now(EASTERN_TZ)


def to_eastern(dt: datetime) -> datetime:
    """Convert a datetime to US/Eastern timezone."""
    if dt.tzinfo is None:
        # Assume naive datetime is already Eastern
        return EASTERN_TZ.localize(dt)
    return dt.astimezone(EASTERN_TZ)


def parse_trading_day(value: Optional[str]) -> date:
    """
    Parse an upstream trading-day string (e.g. "2024-06-14") into a calendar date.

    Raises ValueError on empty or unparseable input.
    """
    if not value or not value.strip():
        raise ValueError("Trading day is empty")
    return date_parser.parse(value.strip()).date()
