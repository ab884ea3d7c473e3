"""Domain layer - pure models with no external dependencies."""

from quote_feed.domain.enums import QuoteSource
from quote_feed.domain.views import Quote, MarketMoversView, MarketSummaryView

__all__ = [
    "QuoteSource",
    "Quote",
    "MarketMoversView",
    "MarketSummaryView",
]
