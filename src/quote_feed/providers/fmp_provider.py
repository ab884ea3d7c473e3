"""Secondary provider: Financial Modeling Prep single-symbol quote endpoint."""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any, Optional

import requests

from quote_feed.core.exceptions import ProviderError
from quote_feed.core.retry import RetryPolicy
from quote_feed.core.timezone import now_utc
from quote_feed.domain.enums import QuoteSource
from quote_feed.domain.views import Quote
from quote_feed.providers.normalize import build_quote

logger = logging.getLogger(__name__)


class FmpQuoteProvider:
    """
    Resolves symbols one request at a time, concurrently.

    Each symbol fails independently: a failed lookup is logged and the symbol
    is left out of the result, never raised.
    """

    name = "fmp"

    def __init__(
        self,
        base_url: str,
        api_key: str = "demo",
        timeout_seconds: float = 10.0,
        max_workers: int = 4,
        retry_policy: Optional[RetryPolicy] = None,
        session: Optional[Any] = None,
        source: QuoteSource = QuoteSource.LIVE_SECONDARY,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout_seconds = timeout_seconds
        self.max_workers = max(1, max_workers)
        self.retry_policy = retry_policy or RetryPolicy()
        self.session = session or requests
        self.source = source

    def get_quote(self, symbol: str) -> Optional[Quote]:
        """
        Fetch one symbol.

        Returns None when the provider has no data for it; raises
        ProviderError on transport, status or payload errors.
        """
        try:
            response = self.session.get(
                f"{self.base_url}/{symbol}",
                params={"apikey": self.api_key},
                timeout=self.timeout_seconds,
            )
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, OSError) as exc:
            raise ProviderError(self.name, f"request for {symbol} failed: {exc}") from exc
        except ValueError as exc:
            raise ProviderError(self.name, f"response for {symbol} is not valid JSON") from exc

        if not isinstance(payload, list):
            raise ProviderError(self.name, f"expected a JSON array for {symbol}")
        if not payload:
            return None
        item = payload[0]
        if not isinstance(item, dict):
            raise ProviderError(self.name, f"malformed quote object for {symbol}")

        return build_quote(
            symbol,
            source=self.source,
            name=item.get("name"),
            price=item.get("price"),
            change=item.get("change"),
            change_percent=item.get("changesPercentage"),
            volume=item.get("volume"),
            market_cap=item.get("marketCap"),
            as_of=now_utc(),
        )

    def _get_quote_with_retry(self, symbol: str) -> Optional[Quote]:
        return self.retry_policy.call(
            lambda: self.get_quote(symbol), description=f"{self.name} quote {symbol}"
        )

    def get_quotes(self, symbols: list[str]) -> dict[str, Quote]:
        """Fetch each symbol independently; returns whatever resolved."""
        if not symbols:
            return {}

        quotes: dict[str, Quote] = {}
        workers = min(self.max_workers, len(symbols))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = {executor.submit(self._get_quote_with_retry, s): s for s in symbols}
            for future in as_completed(futures):
                symbol = futures[future]
                try:
                    quote = future.result()
                except Exception as exc:
                    logger.warning("%s lookup failed for %s: %s", self.name, symbol, exc)
                    continue
                if quote is None:
                    logger.info("%s has no data for %s", self.name, symbol)
                    continue
                quotes[symbol] = quote

        logger.debug("%s resolved %d/%d symbols", self.name, len(quotes), len(symbols))
        return quotes
