"""
Optional provider backed by the yfinance library.
Degrades per symbol; the whole lookup is bounded by a timeout.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FuturesTimeoutError
from typing import Optional

from quote_feed.core.exceptions import ProviderError
from quote_feed.core.timezone import now_utc
from quote_feed.domain.enums import QuoteSource
from quote_feed.domain.views import Quote
from quote_feed.providers.normalize import build_quote

logger = logging.getLogger(__name__)


# Lazy import so tests can patch before import
def _get_yf():
    import yfinance as yf
    return yf


def _safe_quote_for_symbol(symbol: str, tickers_obj, source: QuoteSource) -> Optional[Quote]:
    """
    Build a Quote for one symbol from a yfinance Tickers object.
    Returns None when yfinance has no price for the symbol or raises.
    """
    try:
        ticker = tickers_obj.tickers.get(symbol)
        if ticker is None:
            return None
        info = ticker.info
        if not isinstance(info, dict):
            return None
        # Price: regularMarketPrice preferred, then currentPrice
        price = info.get("regularMarketPrice")
        if price is None:
            price = info.get("currentPrice")
        if price is None:
            return None
        return build_quote(
            symbol,
            source=source,
            name=info.get("shortName") or info.get("longName"),
            price=price,
            change=info.get("regularMarketChange"),
            change_percent=info.get("regularMarketChangePercent"),
            volume=info.get("regularMarketVolume") or info.get("volume"),
            market_cap=info.get("marketCap"),
            as_of=now_utc(),
        )
    except Exception as exc:
        logger.warning("yfinance lookup failed for %s: %s", symbol, exc)
        return None


def _fetch_quotes_impl(symbols: list[str], source: QuoteSource) -> dict[str, Quote]:
    """Call yfinance and return dict symbol -> Quote for symbols that resolved."""
    if not symbols:
        return {}
    yf = _get_yf()
    tickers = yf.Tickers(" ".join(symbols))
    result = {}
    for sym in symbols:
        quote = _safe_quote_for_symbol(sym, tickers, source)
        if quote is not None:
            result[sym] = quote
    return result


class YFinanceQuoteProvider:
    """Fetches quotes through yfinance; disabled unless configured."""

    name = "yfinance"

    def __init__(
        self,
        timeout_seconds: float = 10.0,
        source: QuoteSource = QuoteSource.LIVE_SECONDARY,
    ):
        self.timeout_seconds = timeout_seconds
        self.source = source

    def get_quotes(self, symbols: list[str]) -> dict[str, Quote]:
        if not symbols:
            return {}
        executor = ThreadPoolExecutor(max_workers=1)
        try:
            future = executor.submit(_fetch_quotes_impl, symbols, self.source)
            return future.result(timeout=self.timeout_seconds)
        except FuturesTimeoutError as exc:
            raise ProviderError(
                self.name, f"timed out after {self.timeout_seconds}s"
            ) from exc
        finally:
            # A stalled lookup must not block the caller past the timeout
            executor.shutdown(wait=False)
