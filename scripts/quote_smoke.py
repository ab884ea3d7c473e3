"""Manual smoke test against the live providers.

Usage:
  PYTHONPATH=src python scripts/quote_smoke.py AAPL MSFT BTC-USD
"""
import sys

from quote_feed.app_context import get_app_context
from quote_feed.config.logging_config import setup_logging
from quote_feed.core.timezone import to_iso


def main():
    setup_logging()
    symbols = sys.argv[1:] or ["AAPL", "MSFT", "BTC-USD"]
    service = get_app_context().quotes

    for label, force in (("first", False), ("second (cached expected)", False), ("forced", True)):
        print(f"-- {label}")
        for q in service.fetch_quotes(symbols, force_refresh=force):
            print(f"{q.symbol:<10} {q.price:>12.2f} {q.change_percent:>7.2f}% {q.source.value:<15} {to_iso(q.timestamp)}")

    print("metrics:", service.metrics())


if __name__ == "__main__":
    main()
