"""
Pytest configuration and fixtures for quote-feed tests.

This module provides:
- A controllable monotonic clock for cache freshness tests
- Deterministic, failing and recording quote providers
- Fake HTTP responses/sessions for the requests-based providers
- Service fixtures and a FastAPI test client
"""

from datetime import datetime
from typing import Any, Optional
from unittest.mock import MagicMock

import pytest
import requests
from fastapi.testclient import TestClient

from quote_feed.api.deps import get_market_overview_service, get_quote_service
from quote_feed.app_context import set_app_context
from quote_feed.config.settings import reset_settings
from quote_feed.core.exceptions import ProviderError
from quote_feed.core.timezone import UTC
from quote_feed.domain.enums import QuoteSource
from quote_feed.domain.views import Quote
from quote_feed.main import app
from quote_feed.providers import ProviderChain, SyntheticQuoteGenerator
from quote_feed.services import MarketOverviewService, QuoteCache, QuoteService


FIXED_AS_OF = datetime(2024, 6, 15, 20, 0, 0, tzinfo=UTC)


def make_quote(
    symbol: str,
    price: float = 100.0,
    change: float = 1.0,
    change_percent: float = 1.0,
    volume: int = 1000,
    source: QuoteSource = QuoteSource.LIVE_PRIMARY,
    name: Optional[str] = None,
) -> Quote:
    return Quote(
        symbol=symbol,
        name=name or symbol,
        price=price,
        change=change,
        change_percent=change_percent,
        volume=volume,
        timestamp=FIXED_AS_OF,
        source=source,
    )


# =============================================================================
# CLOCK
# =============================================================================


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


# =============================================================================
# PROVIDERS
# =============================================================================


class DeterministicQuoteProvider:
    """Returns fixed quotes for known symbols and records every call."""

    FIXED_QUOTES = {
        "AAPL": (185.50, 1.25, 0.68),
        "MSFT": (378.25, 1.45, 0.38),
        "GOOGL": (142.75, 1.25, 0.88),
        "TSLA": (248.75, -1.35, -0.54),
        "SPY": (485.25, 1.15, 0.24),
    }

    def __init__(
        self,
        name: str = "deterministic",
        source: QuoteSource = QuoteSource.LIVE_PRIMARY,
        known: Optional[set[str]] = None,
    ):
        self.name = name
        self.source = source
        self.known = known if known is not None else set(self.FIXED_QUOTES)
        self.calls: list[list[str]] = []

    def get_quotes(self, symbols: list[str]) -> dict[str, Quote]:
        self.calls.append(list(symbols))
        result = {}
        for symbol in symbols:
            if symbol in self.known and symbol in self.FIXED_QUOTES:
                price, change, pct = self.FIXED_QUOTES[symbol]
                result[symbol] = make_quote(
                    symbol, price=price, change=change, change_percent=pct, source=self.source
                )
        return result


class FailingQuoteProvider:
    """Provider that always fails outright."""

    def __init__(self, name: str = "failing"):
        self.name = name
        self.calls: list[list[str]] = []

    def get_quotes(self, symbols: list[str]) -> dict[str, Quote]:
        self.calls.append(list(symbols))
        raise ProviderError(self.name, "Network unavailable")


@pytest.fixture
def deterministic_provider() -> DeterministicQuoteProvider:
    return DeterministicQuoteProvider()


@pytest.fixture
def failing_provider() -> FailingQuoteProvider:
    return FailingQuoteProvider()


# =============================================================================
# HTTP FAKES
# =============================================================================


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, json_data: Any = None, status_code: int = 200, json_error: bool = False):
        self._json_data = json_data
        self.status_code = status_code
        self._json_error = json_error

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def json(self) -> Any:
        if self._json_error:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._json_data


def fake_session(*responses: Any) -> MagicMock:
    """Session whose get() returns (or raises) the given items in order."""
    session = MagicMock()
    session.get.side_effect = list(responses)
    return session


# =============================================================================
# SERVICES
# =============================================================================


@pytest.fixture
def quote_cache(clock) -> QuoteCache:
    return QuoteCache(freshness_seconds=30.0, clock=clock)


@pytest.fixture
def quote_service(quote_cache, deterministic_provider) -> QuoteService:
    return QuoteService(
        cache=quote_cache,
        chain=ProviderChain([deterministic_provider]),
        synthetic=SyntheticQuoteGenerator(seed=7),
    )


@pytest.fixture
def market_overview(quote_service) -> MarketOverviewService:
    return MarketOverviewService(quote_service=quote_service)


# =============================================================================
# API CLIENT
# =============================================================================


@pytest.fixture
def client(quote_service, market_overview) -> TestClient:
    """Provide FastAPI test client wired to deterministic providers."""
    app.dependency_overrides[get_quote_service] = lambda: quote_service
    app.dependency_overrides[get_market_overview_service] = lambda: market_overview
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def _isolated_globals():
    """Each test gets fresh settings and application context."""
    reset_settings()
    set_app_context(None)
    yield
    reset_settings()
    set_app_context(None)
