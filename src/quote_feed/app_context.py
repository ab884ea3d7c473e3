"""Application context: builds the quote subsystem once per process.

The cache, provider chain and services are wired here and shared by the
HTTP layer and any in-process collaborator.
"""

from typing import Optional

from quote_feed.config.settings import Settings, get_settings
from quote_feed.core.retry import RetryPolicy
from quote_feed.providers import (
    FmpQuoteProvider,
    ProviderChain,
    SyntheticQuoteGenerator,
    YahooBatchQuoteProvider,
    YFinanceQuoteProvider,
)
from quote_feed.services import MarketOverviewService, QuoteCache, QuoteService


def build_provider_chain(settings: Settings) -> ProviderChain:
    """Primary batch provider, then per-symbol fallbacks, in configured order."""
    retry_policy = RetryPolicy(
        attempts=settings.provider_retry_attempts,
        backoff_seconds=settings.provider_retry_backoff_seconds,
    )
    providers = [
        YahooBatchQuoteProvider(
            base_url=settings.primary_quote_url,
            timeout_seconds=settings.provider_timeout_seconds,
            user_agent=settings.user_agent,
        ),
        FmpQuoteProvider(
            base_url=settings.secondary_quote_url,
            api_key=settings.secondary_api_key,
            timeout_seconds=settings.provider_timeout_seconds,
            max_workers=settings.secondary_max_workers,
            retry_policy=retry_policy,
        ),
    ]
    if settings.enable_yfinance_provider:
        providers.append(YFinanceQuoteProvider(timeout_seconds=settings.provider_timeout_seconds))
    return ProviderChain(providers, retry_policy=retry_policy)


class AppContext:
    """
    Application context providing in-process access to the quote services.

    Services are created lazily and then reused, so every caller shares one cache.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings
        self._quote_service: Optional[QuoteService] = None
        self._market_overview: Optional[MarketOverviewService] = None

    @property
    def settings(self) -> Settings:
        return self._settings or get_settings()

    @property
    def quotes(self) -> QuoteService:
        """Get the QuoteService instance."""
        if self._quote_service is None:
            settings = self.settings
            self._quote_service = QuoteService(
                cache=QuoteCache(freshness_seconds=settings.quote_cache_ttl_seconds),
                chain=build_provider_chain(settings),
                synthetic=SyntheticQuoteGenerator(seed=settings.synthetic_seed),
            )
        return self._quote_service

    @property
    def market_overview(self) -> MarketOverviewService:
        """Get the MarketOverviewService instance."""
        if self._market_overview is None:
            self._market_overview = MarketOverviewService(quote_service=self.quotes)
        return self._market_overview


# Global application context (one per process)
_app_context: Optional[AppContext] = None


def get_app_context() -> AppContext:
    """Get or create the global application context."""
    global _app_context
    if _app_context is None:
        _app_context = AppContext()
    return _app_context


def set_app_context(context: Optional[AppContext]) -> None:
    """Set (or with None, reset) the global application context."""
    global _app_context
    _app_context = context
