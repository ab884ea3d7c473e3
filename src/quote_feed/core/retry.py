"""Bounded retry policy for provider calls."""

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class RetryPolicy:
    """
    Retry a callable a bounded number of times with a fixed backoff.

    attempts=1 means a single call with no retry.
    """

    attempts: int = 1
    backoff_seconds: float = 0.0
    sleep: Callable[[float], None] = field(default=time.sleep, repr=False, compare=False)

    def __post_init__(self):
        if self.attempts < 1:
            raise ValueError("attempts must be >= 1")
        if self.backoff_seconds < 0:
            raise ValueError("backoff_seconds must be >= 0")

    def call(self, fn: Callable[[], T], description: str = "call") -> T:
        """Invoke fn, retrying on any exception; re-raises the last one."""
        for attempt in range(1, self.attempts + 1):
            try:
                return fn()
            except Exception as exc:
                if attempt >= self.attempts:
                    raise
                logger.debug(
                    "%s failed (attempt %d/%d): %s", description, attempt, self.attempts, exc
                )
                if self.backoff_seconds:
                    self.sleep(self.backoff_seconds)
        raise AssertionError("unreachable")
