"""Unit tests for core helpers: symbol validation, retry policy, timestamps."""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from quote_feed.core.exceptions import ProviderError, ValidationError
from quote_feed.core.retry import RetryPolicy
from quote_feed.core.symbols import normalize_symbol, normalize_symbols
from quote_feed.core.timezone import to_iso


# =============================================================================
# SYMBOLS
# =============================================================================


class TestNormalizeSymbols:
    def test_uppercases_strips_and_dedupes_in_order(self):
        assert normalize_symbols([" msft", "AAPL", "msft ", "btc-usd"]) == ["MSFT", "AAPL", "BTC-USD"]

    def test_blank_entries_dropped(self):
        assert normalize_symbols(["", "  ", "spy"]) == ["SPY"]

    def test_tuple_accepted(self):
        assert normalize_symbols(("^gspc", "EURUSD=X")) == ["^GSPC", "EURUSD=X"]

    @pytest.mark.parametrize("bad", ["AAPL", None, 42, {"AAPL": 1}, b"AAPL"])
    def test_non_list_rejected(self, bad):
        with pytest.raises(ValidationError):
            normalize_symbols(bad)

    def test_non_string_element_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            normalize_symbols(["AAPL", 7])
        assert exc_info.value.code == "VALIDATION_ERROR"

    def test_normalize_symbol_none(self):
        assert normalize_symbol(None) is None
        assert normalize_symbol("   ") is None


# =============================================================================
# RETRY
# =============================================================================


class TestRetryPolicy:
    def test_single_attempt_raises_immediately(self):
        fn = MagicMock(side_effect=ProviderError("x", "down"))
        with pytest.raises(ProviderError):
            RetryPolicy().call(fn)
        assert fn.call_count == 1

    def test_retries_then_succeeds_with_backoff(self):
        sleep = MagicMock()
        fn = MagicMock(side_effect=[TimeoutError("slow"), "ok"])
        policy = RetryPolicy(attempts=3, backoff_seconds=0.25, sleep=sleep)

        assert policy.call(fn) == "ok"
        assert fn.call_count == 2
        sleep.assert_called_once_with(0.25)

    def test_gives_up_after_attempts(self):
        sleep = MagicMock()
        fn = MagicMock(side_effect=ConnectionError("down"))
        policy = RetryPolicy(attempts=2, backoff_seconds=0.1, sleep=sleep)

        with pytest.raises(ConnectionError):
            policy.call(fn)
        assert fn.call_count == 2
        assert sleep.call_count == 1

    def test_invalid_configuration(self):
        with pytest.raises(ValueError):
            RetryPolicy(attempts=0)
        with pytest.raises(ValueError):
            RetryPolicy(backoff_seconds=-1)


def test_to_iso_formats_utc_instant():
    dt = datetime(2024, 6, 15, 20, 0, 0, tzinfo=timezone.utc)
    assert to_iso(dt) == "2024-06-15T20:00:00Z"
    assert to_iso(datetime(2024, 6, 15, 20, 0, 0)) == "2024-06-15T20:00:00Z"
