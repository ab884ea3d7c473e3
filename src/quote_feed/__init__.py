"""Market quote retrieval with a short-lived cache and provider fallbacks."""

__version__ = "0.1.0"
