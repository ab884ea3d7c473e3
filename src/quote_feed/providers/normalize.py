"""Coerce untrusted provider fields into the canonical Quote shape."""

import math
from datetime import datetime
from typing import Any, Optional

from quote_feed.core.timezone import now_utc, to_utc
from quote_feed.domain.enums import QuoteSource
from quote_feed.domain.views import Quote


def to_finite_float(value: Any, default: float = 0.0) -> float:
    """Return value as a finite float; None, blanks, non-numerics, NaN and inf -> default."""
    if value is None or isinstance(value, bool):
        return default
    try:
        result = float(value)
    except (TypeError, ValueError, OverflowError):
        return default
    if not math.isfinite(result):
        return default
    return result


def to_volume(value: Any) -> int:
    """Return a non-negative integer volume; anything unusable -> 0."""
    volume = to_finite_float(value)
    if volume < 0:
        return 0
    return int(volume)


def to_market_cap(value: Any) -> Optional[float]:
    """Market cap is optional: missing, negative or non-numeric -> None."""
    if value is None:
        return None
    cap = to_finite_float(value, default=-1.0)
    return cap if cap >= 0 else None


def to_name(value: Any, symbol: str) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return symbol


def build_quote(
    symbol: str,
    *,
    source: QuoteSource,
    name: Any = None,
    price: Any = None,
    change: Any = None,
    change_percent: Any = None,
    volume: Any = None,
    market_cap: Any = None,
    as_of: Optional[datetime] = None,
) -> Quote:
    """
    Build a Quote from raw provider values.

    The timestamp is the time this service accepted the value, never the
    provider's own timestamp.
    """
    return Quote(
        symbol=symbol,
        name=to_name(name, symbol),
        price=to_finite_float(price),
        change=to_finite_float(change),
        change_percent=to_finite_float(change_percent),
        volume=to_volume(volume),
        market_cap=to_market_cap(market_cap),
        timestamp=to_utc(as_of) if as_of else now_utc(),
        source=source,
    )
