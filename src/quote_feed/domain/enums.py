"""Enumerations for domain models."""

from enum import Enum


class QuoteSource(str, Enum):
    """Provenance of a quote."""

    LIVE_PRIMARY = "live-primary"
    LIVE_SECONDARY = "live-secondary"
    SYNTHETIC = "synthetic"
