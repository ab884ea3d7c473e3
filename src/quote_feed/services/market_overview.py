"""Market overview: movers and breadth over a symbol universe."""

from typing import Optional, Sequence

from quote_feed.core.watchlists import DEFAULT_SYMBOLS
from quote_feed.domain.views import MarketMoversView, MarketSummaryView
from quote_feed.services.quote_service import QuoteService


class MarketOverviewService:
    """
    Derives market-wide views from QuoteService results.

    Symbols default to the popular-symbol universe.
    """

    def __init__(self, quote_service: QuoteService):
        self._quotes = quote_service

    def _fetch(self, symbols: Optional[Sequence[str]]):
        return self._quotes.fetch_quotes(list(symbols) if symbols is not None else list(DEFAULT_SYMBOLS))

    def get_market_movers(
        self,
        symbols: Optional[Sequence[str]] = None,
        limit: int = 5,
    ) -> MarketMoversView:
        """Top `limit` gainers (largest change first) and losers (largest drop first)."""
        quotes = self._fetch(symbols)
        ranked = sorted(quotes, key=lambda q: q.change_percent, reverse=True)
        limit = max(0, limit)
        return MarketMoversView(
            gainers=ranked[:limit],
            losers=list(reversed(ranked))[:limit],
        )

    def get_market_summary(self, symbols: Optional[Sequence[str]] = None) -> MarketSummaryView:
        """Counts of gainers/losers/unchanged and the average percent change."""
        quotes = self._fetch(symbols)
        if not quotes:
            return MarketSummaryView()

        avg_change = sum(q.change_percent for q in quotes) / len(quotes)
        return MarketSummaryView(
            total_symbols=len(quotes),
            gainers=sum(1 for q in quotes if q.change_percent > 0),
            losers=sum(1 for q in quotes if q.change_percent < 0),
            unchanged=sum(1 for q in quotes if q.change_percent == 0),
            avg_change=round(avg_change, 2),
        )
