"""Synthetic quote generator, the last resort when no live provider has data."""

import logging
import random
from typing import Optional

from quote_feed.core.timezone import now_utc
from quote_feed.domain.enums import QuoteSource
from quote_feed.domain.views import Quote

logger = logging.getLogger(__name__)


# Known names and base prices for common symbols
_BASE_DATA: dict[str, tuple[str, float]] = {
    "AAPL": ("Apple Inc.", 185.50),
    "MSFT": ("Microsoft Corporation", 378.20),
    "GOOGL": ("Alphabet Inc.", 142.80),
    "AMZN": ("Amazon.com Inc.", 145.30),
    "TSLA": ("Tesla Inc.", 248.90),
    "META": ("Meta Platforms Inc.", 325.60),
    "NVDA": ("NVIDIA Corporation", 875.50),
    "NFLX": ("Netflix Inc.", 485.20),
    "SPY": ("SPDR S&P 500 ETF", 445.80),
    "QQQ": ("Invesco QQQ Trust", 365.20),
    "BTC-USD": ("Bitcoin USD", 67500.00),
    "ETH-USD": ("Ethereum USD", 3450.50),
    "ADA-USD": ("Cardano USD", 0.85),
    "SOL-USD": ("Solana USD", 145.30),
}

UNKNOWN_BASE_RANGE = (100.0, 300.0)
# In hundredths of a percent: [-4.00, 4.00)
CHANGE_PERCENT_HUNDREDTHS = (-400, 400)
VOLUME_RANGE = (1_000_000, 11_000_000)


class SyntheticQuoteGenerator:
    """
    Generates plausible quotes for symbols no live provider could resolve.

    change = base * change_percent / 100 and price = base + change, so unlike
    live quotes these are arithmetically consistent (before rounding).
    """

    def __init__(self, seed: Optional[int] = None):
        """Initialize with optional random seed for reproducibility."""
        self._rng = random.Random(seed)

    def base_for(self, symbol: str) -> tuple[str, float]:
        """Return (name, base_price); unknown symbols get a random base in [100, 300)."""
        known = _BASE_DATA.get(symbol)
        if known is not None:
            return known
        low, high = UNKNOWN_BASE_RANGE
        return symbol, low + self._rng.random() * (high - low)

    def generate(self, symbol: str) -> Quote:
        name, base_price = self.base_for(symbol)
        change_percent = self._rng.randrange(*CHANGE_PERCENT_HUNDREDTHS) / 100
        change = base_price * change_percent / 100
        price = base_price + change
        return Quote(
            symbol=symbol,
            name=name,
            price=round(price, 2),
            change=round(change, 2),
            change_percent=round(change_percent, 2),
            volume=self._rng.randrange(*VOLUME_RANGE),
            timestamp=now_utc(),
            source=QuoteSource.SYNTHETIC,
        )

    def get_quotes(self, symbols: list[str]) -> dict[str, Quote]:
        """Return a synthetic quote for every requested symbol."""
        if symbols:
            logger.info("Generating synthetic quotes for %s", ", ".join(symbols))
        return {symbol: self.generate(symbol) for symbol in symbols}
