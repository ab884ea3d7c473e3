"""Dependency injection for FastAPI."""

from quote_feed.app_context import get_app_context
from quote_feed.services import MarketOverviewService, QuoteService


def get_quote_service() -> QuoteService:
    """Provide the process-wide QuoteService instance."""
    return get_app_context().quotes


def get_market_overview_service() -> MarketOverviewService:
    """Provide the process-wide MarketOverviewService instance."""
    return get_app_context().market_overview
