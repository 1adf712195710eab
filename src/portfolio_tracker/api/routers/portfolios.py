"""Portfolio and holding endpoints."""

from fastapi import APIRouter, Depends, Response

from portfolio_tracker.api.deps import get_portfolio_service
from portfolio_tracker.api.schemas import (
    HoldingCreateRequest,
    HoldingResponse,
    HoldingUpdateRequest,
    PortfolioCreate,
    PortfolioDetailResponse,
    PortfolioResponse,
    PortfolioUpdate,
    PriceRefreshResponse,
)
from portfolio_tracker.domain.views import HoldingPerformance
from portfolio_tracker.services import HoldingCreate, HoldingUpdate, PortfolioService

router = APIRouter(prefix="/portfolios", tags=["portfolios"])


@router.get("", response_model=list[PortfolioResponse])
def list_portfolios(
    service: PortfolioService = Depends(get_portfolio_service),
) -> list[PortfolioResponse]:
    """List all portfolios."""
    return [PortfolioResponse.model_validate(p) for p in service.list_portfolios()]


@router.post("", response_model=PortfolioResponse, status_code=201)
def create_portfolio(
    data: PortfolioCreate,
    service: PortfolioService = Depends(get_portfolio_service),
) -> PortfolioResponse:
    """Create a new portfolio."""
    portfolio = service.create_portfolio(
        name=data.name,
        description=data.description,
        portfolio_type=data.portfolio_type,
    )
    return PortfolioResponse.model_validate(portfolio)


@router.get("/{portfolio_id}", response_model=PortfolioDetailResponse)
def get_portfolio(
    portfolio_id: str,
    service: PortfolioService = Depends(get_portfolio_service),
) -> PortfolioDetailResponse:
    """Get a portfolio with its holdings and gain/loss."""
    return PortfolioDetailResponse.from_summary(service.get_portfolio_summary(portfolio_id))


@router.put("/{portfolio_id}", response_model=PortfolioResponse)
def update_portfolio(
    portfolio_id: str,
    data: PortfolioUpdate,
    service: PortfolioService = Depends(get_portfolio_service),
) -> PortfolioResponse:
    """Edit name, description or type of a portfolio."""
    portfolio = service.update_portfolio(
        portfolio_id,
        name=data.name,
        description=data.description,
        portfolio_type=data.portfolio_type,
    )
    return PortfolioResponse.model_validate(portfolio)


@router.delete("/{portfolio_id}", status_code=204)
def delete_portfolio(
    portfolio_id: str,
    service: PortfolioService = Depends(get_portfolio_service),
) -> Response:
    """Delete a portfolio and its holdings."""
    service.delete_portfolio(portfolio_id)
    return Response(status_code=204)


@router.post("/{portfolio_id}/update-prices", response_model=PriceRefreshResponse)
def update_prices(
    portfolio_id: str,
    service: PortfolioService = Depends(get_portfolio_service),
) -> PriceRefreshResponse:
    """Refresh current prices (and missing sectors) for every holding."""
    return PriceRefreshResponse.model_validate(service.refresh_prices(portfolio_id))


# Holdings


@router.get("/{portfolio_id}/holdings", response_model=list[HoldingResponse])
def list_holdings(
    portfolio_id: str,
    service: PortfolioService = Depends(get_portfolio_service),
) -> list[HoldingResponse]:
    """List holdings of a portfolio with performance."""
    return [
        HoldingResponse.from_performance(HoldingPerformance.from_holding(h))
        for h in service.list_holdings(portfolio_id)
    ]


@router.post("/{portfolio_id}/holdings", response_model=HoldingResponse, status_code=201)
def create_holding(
    portfolio_id: str,
    data: HoldingCreateRequest,
    service: PortfolioService = Depends(get_portfolio_service),
) -> HoldingResponse:
    """Add a holding; the symbol is validated against market data."""
    holding = service.create_holding(
        portfolio_id,
        HoldingCreate(
            symbol=data.symbol,
            shares=data.shares,
            cost_basis=data.cost_basis,
            purchase_date=data.purchase_date,
        ),
    )
    return HoldingResponse.from_performance(HoldingPerformance.from_holding(holding))


@router.get("/{portfolio_id}/holdings/{holding_id}", response_model=HoldingResponse)
def get_holding(
    portfolio_id: str,
    holding_id: str,
    service: PortfolioService = Depends(get_portfolio_service),
) -> HoldingResponse:
    """Get a single holding."""
    holding = service.get_holding(portfolio_id, holding_id)
    return HoldingResponse.from_performance(HoldingPerformance.from_holding(holding))


@router.put("/{portfolio_id}/holdings/{holding_id}", response_model=HoldingResponse)
def update_holding(
    portfolio_id: str,
    holding_id: str,
    data: HoldingUpdateRequest,
    service: PortfolioService = Depends(get_portfolio_service),
) -> HoldingResponse:
    """Edit shares, cost basis or purchase date."""
    holding = service.update_holding(
        portfolio_id,
        holding_id,
        HoldingUpdate(
            shares=data.shares,
            cost_basis=data.cost_basis,
            purchase_date=data.purchase_date,
        ),
    )
    return HoldingResponse.from_performance(HoldingPerformance.from_holding(holding))


@router.delete("/{portfolio_id}/holdings/{holding_id}", status_code=204)
def delete_holding(
    portfolio_id: str,
    holding_id: str,
    service: PortfolioService = Depends(get_portfolio_service),
) -> Response:
    """Remove a holding."""
    service.delete_holding(portfolio_id, holding_id)
    return Response(status_code=204)
