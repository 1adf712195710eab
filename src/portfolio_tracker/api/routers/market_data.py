"""Market data endpoints: quotes, company info, symbol search."""

from fastapi import APIRouter, Depends, Query, Response

from portfolio_tracker.api.deps import get_quote_service
from portfolio_tracker.api.schemas import (
    CompanyInfoResponse,
    QuoteLookupResponse,
    QuoteResponse,
    SymbolMatchResponse,
)
from portfolio_tracker.core.exceptions import NotFoundError, ValidationError
from portfolio_tracker.services import QuoteService

router = APIRouter(prefix="/market-data", tags=["market-data"])


@router.get("/quote/{symbol}", response_model=QuoteLookupResponse)
def get_quote(
    symbol: str,
    quotes: QuoteService = Depends(get_quote_service),
) -> QuoteLookupResponse:
    """Get the current quote for a symbol."""
    if not symbol.strip():
        raise ValidationError("Symbol is required")

    lookup = quotes.lookup(symbol)
    if lookup.quote is None:
        raise NotFoundError("Symbol", lookup.symbol)

    return QuoteLookupResponse(
        quote=QuoteResponse.model_validate(lookup.quote),
        source=lookup.source,
    )


@router.get("/company/{symbol}", response_model=CompanyInfoResponse)
def get_company_info(
    symbol: str,
    quotes: QuoteService = Depends(get_quote_service),
) -> CompanyInfoResponse:
    """Get company name and sector classification."""
    info = quotes.get_company_info(symbol)
    if info is None:
        raise NotFoundError("Company", symbol.strip().upper())
    return CompanyInfoResponse.model_validate(info)


@router.get("/search", response_model=list[SymbolMatchResponse])
def search_symbols(
    q: str = Query(..., description="Ticker or company name fragment"),
    quotes: QuoteService = Depends(get_quote_service),
) -> list[SymbolMatchResponse]:
    """Search symbols by ticker or company name (at most 10 results)."""
    return [SymbolMatchResponse.model_validate(m) for m in quotes.search_symbols(q)]


@router.delete("/cache/{symbol}", status_code=204)
def invalidate_cached_quote(
    symbol: str,
    quotes: QuoteService = Depends(get_quote_service),
) -> Response:
    """Drop the cached quote for one symbol."""
    quotes.invalidate(symbol)
    return Response(status_code=204)


@router.delete("/cache", status_code=204)
def invalidate_quote_cache(
    quotes: QuoteService = Depends(get_quote_service),
) -> Response:
    """Drop every cached quote."""
    quotes.invalidate_all()
    return Response(status_code=204)
