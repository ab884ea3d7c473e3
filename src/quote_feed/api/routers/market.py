"""Market overview endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from quote_feed.api.deps import get_market_overview_service
from quote_feed.api.routers.quotes import parse_symbols
from quote_feed.api.schemas import MarketMoversResponse, MarketSummaryResponse, QuoteResponse
from quote_feed.services import MarketOverviewService

router = APIRouter(prefix="/market", tags=["market"])


@router.get("/movers", response_model=MarketMoversResponse)
def get_market_movers(
    symbols: Optional[str] = Query(None, description="Comma-separated symbols (default universe if empty)"),
    limit: int = Query(5, ge=1, le=50),
    overview: MarketOverviewService = Depends(get_market_overview_service),
) -> MarketMoversResponse:
    """Top gainers and losers by percent change."""
    movers = overview.get_market_movers(parse_symbols(symbols) or None, limit=limit)
    return MarketMoversResponse(
        gainers=[QuoteResponse.from_quote(q) for q in movers.gainers],
        losers=[QuoteResponse.from_quote(q) for q in movers.losers],
    )


@router.get("/summary", response_model=MarketSummaryResponse)
def get_market_summary(
    symbols: Optional[str] = Query(None, description="Comma-separated symbols (default universe if empty)"),
    overview: MarketOverviewService = Depends(get_market_overview_service),
) -> MarketSummaryResponse:
    """Counts of gainers, losers and unchanged symbols plus average change."""
    summary = overview.get_market_summary(parse_symbols(symbols) or None)
    return MarketSummaryResponse(
        total_symbols=summary.total_symbols,
        gainers=summary.gainers,
        losers=summary.losers,
        unchanged=summary.unchanged,
        avg_change=summary.avg_change,
    )
