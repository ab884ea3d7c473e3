"""Core utilities and shared functionality."""

from quote_feed.core.timezone import now_utc, to_utc, to_iso, UTC
from quote_feed.core.exceptions import AppError, ValidationError, ProviderError
from quote_feed.core.retry import RetryPolicy
from quote_feed.core.symbols import normalize_symbol, normalize_symbols

__all__ = [
    "now_utc",
    "to_utc",
    "to_iso",
    "UTC",
    "AppError",
    "ValidationError",
    "ProviderError",
    "RetryPolicy",
    "normalize_symbol",
    "normalize_symbols",
]
