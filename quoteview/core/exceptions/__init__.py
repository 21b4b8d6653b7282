"""Exception handling module."""

from quoteview.core.exceptions.base import (
    ConfigurationError,
    NetworkError,
    PayloadShapeError,
    ProviderError,
    ProviderMessageError,
    QuoteViewError,
)

__all__ = [
    "QuoteViewError",
    "PayloadShapeError",
    "ProviderError",
    "ProviderMessageError",
    "NetworkError",
    "ConfigurationError",
]
