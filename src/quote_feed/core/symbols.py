"""Symbol validation and normalization."""

from typing import Any, Optional

from quote_feed.core.exceptions import ValidationError


def normalize_symbol(s: Optional[str]) -> Optional[str]:
    """Normalize symbol: strip whitespace and uppercase; None or empty -> None."""
    if s is None:
        return None
    stripped = s.strip().upper()
    return stripped if stripped else None


def normalize_symbols(symbols: Any) -> list[str]:
    """
    Validate a symbol list and return normalized, de-duplicated symbols in input order.

    Raises ValidationError if symbols is not a list/tuple of strings.
    Blank entries are dropped.
    """
    if isinstance(symbols, (str, bytes)) or not isinstance(symbols, (list, tuple)):
        raise ValidationError(
            f"symbols must be a list of strings, got {type(symbols).__name__}"
        )
    result: list[str] = []
    seen: set[str] = set()
    for index, raw in enumerate(symbols):
        if not isinstance(raw, str):
            raise ValidationError(
                f"symbols[{index}] must be a string, got {type(raw).__name__}"
            )
        symbol = normalize_symbol(raw)
        if symbol is None or symbol in seen:
            continue
        seen.add(symbol)
        result.append(symbol)
    return result
