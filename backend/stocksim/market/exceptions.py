"""Exceptions raised by the market data core.

Everything derives from :class:`MarketDataError` so callers (the HTTP layer,
mostly) can catch the whole family in one place.
"""

from __future__ import annotations


class MarketDataError(Exception):
    """Base class for market data errors."""


class InvalidInput(MarketDataError, ValueError):
    """Raised when a request or build input is malformed.

    Non-positive base prices and unrecognized market, trend, range or quote
    kind values end up here. Retrying the same call will fail the same way.
    """


class NotFound(MarketDataError, LookupError):
    """Raised when a symbol lookup has no match."""


__all__ = [
    "MarketDataError",
    "InvalidInput",
    "NotFound",
]
