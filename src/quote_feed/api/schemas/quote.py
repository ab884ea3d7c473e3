"""Pydantic schemas for quote API responses."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from quote_feed.domain.enums import QuoteSource
from quote_feed.domain.views import Quote


class CamelModel(BaseModel):
    """Serializes field names as camelCase (changePercent, marketCap)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class QuoteResponse(CamelModel):
    """Response schema for a market quote."""

    symbol: str
    name: str
    price: float
    change: float
    change_percent: float
    volume: int
    market_cap: Optional[float] = None
    timestamp: datetime
    source: QuoteSource

    @classmethod
    def from_quote(cls, quote: Quote) -> "QuoteResponse":
        return cls(
            symbol=quote.symbol,
            name=quote.name,
            price=quote.price,
            change=quote.change,
            change_percent=quote.change_percent,
            volume=quote.volume,
            market_cap=quote.market_cap,
            timestamp=quote.timestamp,
            source=quote.source,
        )


class QuoteListResponse(CamelModel):
    """Quotes sorted by symbol."""

    quotes: list[QuoteResponse]
    count: int


class CacheClearedResponse(CamelModel):
    cleared: bool


class MarketMoversResponse(CamelModel):
    """Top gainers and losers."""

    gainers: list[QuoteResponse]
    losers: list[QuoteResponse]


class MarketSummaryResponse(CamelModel):
    """Market breadth statistics."""

    total_symbols: int
    gainers: int
    losers: int
    unchanged: int
    avg_change: float
