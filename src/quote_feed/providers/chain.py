"""Ordered chain of live quote providers."""

import logging
from typing import Optional, Sequence

from quote_feed.core.retry import RetryPolicy
from quote_feed.domain.views import Quote
from quote_feed.providers.market_data_provider import QuoteProvider

logger = logging.getLogger(__name__)


class ProviderChain:
    """
    Queries providers in order, each for the symbols still unresolved.

    A provider that raises resolves nothing; its whole request falls through
    to the next provider. resolve() itself never raises.
    """

    def __init__(
        self,
        providers: Sequence[QuoteProvider],
        retry_policy: Optional[RetryPolicy] = None,
    ):
        self._providers = list(providers)
        self._retry = retry_policy or RetryPolicy()

    @property
    def providers(self) -> list[QuoteProvider]:
        return list(self._providers)

    def append(self, provider: QuoteProvider) -> None:
        """Add a provider at the end of the chain."""
        self._providers.append(provider)

    def resolve(self, symbols: list[str]) -> dict[str, Quote]:
        """Return quotes for whichever symbols some provider could resolve."""
        resolved: dict[str, Quote] = {}
        remaining = list(symbols)

        for provider in self._providers:
            if not remaining:
                break
            name = getattr(provider, "name", type(provider).__name__)
            try:
                quotes = self._retry.call(
                    lambda: provider.get_quotes(remaining), description=f"{name} batch"
                )
            except Exception as exc:
                logger.warning(
                    "Provider %s failed for %d symbol(s), falling through: %s",
                    name,
                    len(remaining),
                    exc,
                )
                continue

            for symbol in remaining:
                quote = quotes.get(symbol)
                if quote is not None:
                    resolved[symbol] = quote
            remaining = [s for s in remaining if s not in resolved]

        if remaining:
            logger.info("No live data for %s", ", ".join(remaining))
        return resolved
