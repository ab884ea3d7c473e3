"""
Quote service: cache-first quote retrieval over a provider chain.
Unresolved symbols are filled with synthetic quotes so results are always total.
"""

import logging
import threading
from typing import Optional, Sequence

from quote_feed.core.symbols import normalize_symbols
from quote_feed.core.watchlists import CRYPTO_PAIRS, FOREX_PAIRS, GLOBAL_INDICES
from quote_feed.domain.views import Quote
from quote_feed.providers.chain import ProviderChain
from quote_feed.providers.synthetic_provider import SyntheticQuoteGenerator
from quote_feed.services.quote_cache import QuoteCache

logger = logging.getLogger(__name__)


class QuoteService:
    """
    Orchestrates cache reads, live provider lookups and synthetic fallback.

    Provider failures never escape fetch_quotes(); only invalid input raises.
    """

    def __init__(
        self,
        cache: QuoteCache,
        chain: ProviderChain,
        synthetic: Optional[SyntheticQuoteGenerator] = None,
    ):
        self._cache = cache
        self._chain = chain
        self._synthetic = synthetic or SyntheticQuoteGenerator()
        self._stats_lock = threading.Lock()
        self._requests = 0
        self._cache_hits = 0
        self._live_resolved = 0
        self._synthetic_filled = 0
        self._last_batch_size = 0

    @property
    def cache(self) -> QuoteCache:
        return self._cache

    def fetch_quotes(self, symbols: Sequence[str], force_refresh: bool = False) -> list[Quote]:
        """
        Return exactly one quote per distinct (normalized) symbol, sorted by symbol.

        With force_refresh the cache is not read, but results are still written back.
        Raises ValidationError if symbols is not a list of strings.
        """
        wanted = normalize_symbols(symbols)
        if not wanted:
            return []

        hits: dict[str, Quote] = {}
        if force_refresh:
            misses = list(wanted)
        else:
            misses = []
            for symbol in wanted:
                cached = self._cache.get(symbol)
                if cached is not None:
                    hits[symbol] = cached
                else:
                    misses.append(symbol)

        fresh: dict[str, Quote] = {}
        live_count = 0
        synthetic_count = 0
        if misses:
            try:
                live = self._chain.resolve(misses)
            except Exception:
                logger.exception("Provider chain failed unexpectedly")
                live = {}
            live_count = len(live)

            unresolved = [s for s in misses if s not in live]
            synthetic = self._synthetic.get_quotes(unresolved)
            synthetic_count = len(synthetic)

            fresh = {**live, **synthetic}
            for symbol in misses:
                self._cache.put(symbol, fresh[symbol])

        logger.debug(
            "fetch_quotes target=%d cache_hits=%d live=%d synthetic=%d force_refresh=%s",
            len(wanted),
            len(hits),
            live_count,
            synthetic_count,
            force_refresh,
        )
        with self._stats_lock:
            self._requests += 1
            self._cache_hits += len(hits)
            self._live_resolved += live_count
            self._synthetic_filled += synthetic_count
            self._last_batch_size = len(wanted)

        combined = {**hits, **fresh}
        return sorted(combined.values(), key=lambda q: q.symbol)

    def fetch_global_indices(self) -> list[Quote]:
        """Quotes for the major world equity indices."""
        return self.fetch_quotes(list(GLOBAL_INDICES))

    def fetch_crypto_data(self) -> list[Quote]:
        """Quotes for the major crypto/USD pairs."""
        return self.fetch_quotes(list(CRYPTO_PAIRS))

    def fetch_forex_data(self) -> list[Quote]:
        """Quotes for the major currency pairs."""
        return self.fetch_quotes(list(FOREX_PAIRS))

    def clear_cache(self) -> None:
        """Drop every cached quote; the next fetch goes to the providers."""
        self._cache.clear()
        logger.info("Quote cache cleared")

    def metrics(self) -> dict[str, int]:
        with self._stats_lock:
            return {
                "requests": self._requests,
                "cache_hits": self._cache_hits,
                "live_resolved": self._live_resolved,
                "synthetic_filled": self._synthetic_filled,
                "last_batch_size": self._last_batch_size,
                "cached_symbols": len(self._cache),
            }
