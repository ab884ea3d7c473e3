"""Quote endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from quote_feed.api.deps import get_quote_service
from quote_feed.api.schemas import CacheClearedResponse, QuoteListResponse, QuoteResponse
from quote_feed.domain.views import Quote
from quote_feed.services import QuoteService

router = APIRouter(prefix="/quotes", tags=["quotes"])


def parse_symbols(symbols: Optional[str]) -> list[str]:
    """Split a comma-separated query value; blanks are dropped later by the service."""
    if not symbols:
        return []
    return symbols.split(",")


def _to_response(quotes: list[Quote]) -> QuoteListResponse:
    return QuoteListResponse(
        quotes=[QuoteResponse.from_quote(q) for q in quotes],
        count=len(quotes),
    )


@router.get("", response_model=QuoteListResponse)
def get_quotes(
    symbols: str = Query(..., description="Comma-separated symbols, e.g. AAPL,MSFT,BTC-USD"),
    force_refresh: bool = Query(False, description="Bypass the cache read"),
    service: QuoteService = Depends(get_quote_service),
) -> QuoteListResponse:
    """Get one quote per symbol, sorted by symbol."""
    return _to_response(service.fetch_quotes(parse_symbols(symbols), force_refresh=force_refresh))


@router.delete("/cache", response_model=CacheClearedResponse)
def clear_cache(service: QuoteService = Depends(get_quote_service)) -> CacheClearedResponse:
    """Invalidate every cached quote."""
    service.clear_cache()
    return CacheClearedResponse(cleared=True)


@router.get("/indices", response_model=QuoteListResponse)
def get_global_indices(service: QuoteService = Depends(get_quote_service)) -> QuoteListResponse:
    return _to_response(service.fetch_global_indices())


@router.get("/crypto", response_model=QuoteListResponse)
def get_crypto(service: QuoteService = Depends(get_quote_service)) -> QuoteListResponse:
    return _to_response(service.fetch_crypto_data())


@router.get("/forex", response_model=QuoteListResponse)
def get_forex(service: QuoteService = Depends(get_quote_service)) -> QuoteListResponse:
    return _to_response(service.fetch_forex_data())
