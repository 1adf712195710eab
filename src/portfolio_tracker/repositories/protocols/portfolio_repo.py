"""Portfolio repository protocol."""

from typing import Protocol, Optional

from portfolio_tracker.domain.models import Portfolio


class PortfolioRepository(Protocol):
    """Interface for portfolio data access."""

    def create(self, portfolio: Portfolio) -> Portfolio:
        """Persist a new portfolio."""
        ...

    def get_by_id(self, portfolio_id: str) -> Optional[Portfolio]:
        """Retrieve portfolio by ID."""
        ...

    def list_all(self) -> list[Portfolio]:
        """List all portfolios."""
        ...

    def update(self, portfolio: Portfolio) -> Portfolio:
        """Update an existing portfolio."""
        ...

    def delete(self, portfolio_id: str) -> None:
        """Delete a portfolio and its holdings."""
        ...
