"""View models for service outputs."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from quote_feed.domain.enums import QuoteSource


@dataclass(frozen=True)
class Quote:
    """Market quote for a symbol, as accepted by this service at `timestamp`."""

    symbol: str
    name: str
    price: float
    change: float
    change_percent: float
    volume: int
    timestamp: datetime
    market_cap: Optional[float] = None
    source: QuoteSource = QuoteSource.LIVE_PRIMARY

    @property
    def is_synthetic(self) -> bool:
        return self.source == QuoteSource.SYNTHETIC


@dataclass
class MarketMoversView:
    """Top gainers and losers by percent change."""

    gainers: list[Quote] = field(default_factory=list)
    losers: list[Quote] = field(default_factory=list)


@dataclass
class MarketSummaryView:
    """Breadth statistics over a set of quotes."""

    total_symbols: int = 0
    gainers: int = 0
    losers: int = 0
    unchanged: int = 0
    avg_change: float = 0.0
