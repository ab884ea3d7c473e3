"""Market data provider protocol."""

from typing import Protocol

from quote_feed.domain.views import Quote


class QuoteProvider(Protocol):
    """
    Protocol for live quote providers.

    Implementations resolve as many of the requested symbols as they can.
    Symbols they have no data for are omitted from the result. A provider
    that fails outright (so no partial result can be trusted) raises
    ProviderError.
    """

    name: str

    def get_quotes(self, symbols: list[str]) -> dict[str, Quote]:
        """
        Fetch quotes for multiple normalized symbols.

        Returns dict mapping symbol -> Quote.
        """
        ...
