"""Service layer - quote retrieval orchestration."""

from quote_feed.services.quote_cache import QuoteCache, CacheEntry
from quote_feed.services.quote_service import QuoteService
from quote_feed.services.market_overview import MarketOverviewService

__all__ = [
    "QuoteCache",
    "CacheEntry",
    "QuoteService",
    "MarketOverviewService",
]
