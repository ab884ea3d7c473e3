"""Primary provider: Yahoo Finance batch quote endpoint."""

import logging
from typing import Any, Optional

import requests

from quote_feed.core.exceptions import ProviderError
from quote_feed.core.symbols import normalize_symbol
from quote_feed.core.timezone import now_utc
from quote_feed.domain.enums import QuoteSource
from quote_feed.domain.views import Quote
from quote_feed.providers.normalize import build_quote

logger = logging.getLogger(__name__)


class YahooBatchQuoteProvider:
    """
    Resolves a whole symbol batch with a single request.

    The response cannot tell a per-symbol failure apart from a failed batch,
    so any transport, status or payload error raises ProviderError for the
    entire batch.
    """

    name = "yahoo"

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 10.0,
        user_agent: Optional[str] = None,
        session: Optional[Any] = None,
        source: QuoteSource = QuoteSource.LIVE_PRIMARY,
    ):
        self.base_url = base_url
        self.timeout_seconds = timeout_seconds
        self.user_agent = user_agent
        self.session = session or requests
        self.source = source

    def _request(self, symbols: list[str]) -> Any:
        headers = {"User-Agent": self.user_agent} if self.user_agent else {}
        try:
            response = self.session.get(
                self.base_url,
                params={"symbols": ",".join(symbols)},
                headers=headers,
                timeout=self.timeout_seconds,
            )
            response.raise_for_status()
            return response.json()
        except (requests.RequestException, OSError) as exc:
            raise ProviderError(self.name, f"request failed: {exc}") from exc
        except ValueError as exc:
            raise ProviderError(self.name, "response is not valid JSON") from exc

    def get_quotes(self, symbols: list[str]) -> dict[str, Quote]:
        """Fetch all symbols in one call; raises ProviderError on any failure."""
        if not symbols:
            return {}

        payload = self._request(symbols)
        if not isinstance(payload, dict) or not isinstance(payload.get("quoteResponse"), dict):
            raise ProviderError(self.name, "missing quoteResponse in payload")
        body = payload["quoteResponse"]
        if body.get("error") is not None:
            raise ProviderError(self.name, f"upstream reported error: {body['error']}")
        results = body.get("result")
        if not isinstance(results, list):
            raise ProviderError(self.name, "quoteResponse.result is not a list")

        requested = set(symbols)
        as_of = now_utc()
        quotes: dict[str, Quote] = {}
        for item in results:
            if not isinstance(item, dict):
                continue
            raw_symbol = item.get("symbol")
            symbol = normalize_symbol(raw_symbol) if isinstance(raw_symbol, str) else None
            if symbol is None or symbol not in requested or symbol in quotes:
                continue
            quotes[symbol] = build_quote(
                symbol,
                source=self.source,
                name=item.get("shortName") or item.get("longName"),
                price=item.get("regularMarketPrice"),
                change=item.get("regularMarketChange"),
                change_percent=item.get("regularMarketChangePercent"),
                volume=item.get("regularMarketVolume"),
                market_cap=item.get("marketCap"),
                as_of=as_of,
            )

        logger.debug("%s resolved %d/%d symbols", self.name, len(quotes), len(symbols))
        return quotes
