"""Pydantic schemas for API request/response."""

from quote_feed.api.schemas.quote import (
    QuoteResponse,
    QuoteListResponse,
    CacheClearedResponse,
    MarketMoversResponse,
    MarketSummaryResponse,
)

__all__ = [
    "QuoteResponse",
    "QuoteListResponse",
    "CacheClearedResponse",
    "MarketMoversResponse",
    "MarketSummaryResponse",
]
