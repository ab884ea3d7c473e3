"""Time-bounded in-memory quote cache."""

import threading
import time
from dataclasses import dataclass
from typing import Callable, Optional

from quote_feed.core.symbols import normalize_symbol
from quote_feed.domain.views import Quote

DEFAULT_FRESHNESS_SECONDS = 30.0


@dataclass(frozen=True)
class CacheEntry:
    """A quote and the monotonic time it was written."""

    quote: Quote
    fetched_at: float


class QuoteCache:
    """
    Maps symbol -> last-known quote.

    Entries older than the freshness window read as absent but stay resident
    until overwritten or cleared; nothing is evicted on a timer.
    """

    def __init__(
        self,
        freshness_seconds: float = DEFAULT_FRESHNESS_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._freshness = freshness_seconds
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    @property
    def freshness_seconds(self) -> float:
        return self._freshness

    def get(self, symbol: str) -> Optional[Quote]:
        """Return the cached quote if it is still fresh, else None."""
        key = normalize_symbol(symbol)
        if key is None:
            return None
        with self._lock:
            entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() - entry.fetched_at < self._freshness:
            return entry.quote
        return None

    def put(self, symbol: str, quote: Quote) -> None:
        """Replace any entry for symbol with a new one stamped now."""
        key = normalize_symbol(symbol)
        if key is None:
            raise ValueError("symbol must be a non-empty string")
        entry = CacheEntry(quote=quote, fetched_at=self._clock())
        with self._lock:
            self._entries[key] = entry

    def clear(self) -> None:
        """Remove all entries."""
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, symbol: object) -> bool:
        if not isinstance(symbol, str):
            return False
        key = normalize_symbol(symbol)
        with self._lock:
            return key in self._entries
