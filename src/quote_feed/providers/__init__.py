"""Quote providers module."""

from quote_feed.providers.market_data_provider import QuoteProvider
from quote_feed.providers.yahoo_provider import YahooBatchQuoteProvider
from quote_feed.providers.fmp_provider import FmpQuoteProvider
from quote_feed.providers.yfinance_provider import YFinanceQuoteProvider
from quote_feed.providers.synthetic_provider import SyntheticQuoteGenerator
from quote_feed.providers.chain import ProviderChain

__all__ = [
    "QuoteProvider",
    "YahooBatchQuoteProvider",
    "FmpQuoteProvider",
    "YFinanceQuoteProvider",
    "SyntheticQuoteGenerator",
    "ProviderChain",
]
