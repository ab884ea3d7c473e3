"""API routers package."""

from quote_feed.api.routers.quotes import router as quotes_router
from quote_feed.api.routers.market import router as market_router

__all__ = [
    "quotes_router",
    "market_router",
]
