"""In-memory repository implementations."""

from portfolio_tracker.repositories.memory.quote_cache import InMemoryQuoteCache

__all__ = [
    "InMemoryQuoteCache",
]
