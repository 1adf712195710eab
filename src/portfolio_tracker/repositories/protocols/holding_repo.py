"""Holding repository protocol."""

from typing import Protocol, Optional

from portfolio_tracker.domain.models import Holding


class HoldingRepository(Protocol):
    """Interface for holding data access."""

    def create(self, holding: Holding) -> Holding:
        """Persist a new holding."""
        ...

    def get_by_id(self, holding_id: str) -> Optional[Holding]:
        """Retrieve holding by ID."""
        ...

    def get_by_symbol(self, portfolio_id: str, symbol: str) -> Optional[Holding]:
        """Retrieve the holding for a symbol within a portfolio."""
        ...

    def list_by_portfolio(self, portfolio_id: str) -> list[Holding]:
        """List holdings of a portfolio ordered by symbol."""
        ...

    def update(self, holding: Holding) -> Holding:
        """Update an existing holding."""
        ...

    def delete(self, holding_id: str) -> None:
        """Delete a holding."""
        ...
