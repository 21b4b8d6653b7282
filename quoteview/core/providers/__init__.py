"""Quote provider clients."""

from quoteview.core.providers.alpha_vantage import (
    AlphaVantageClient,
    SUPPORTED_INTERVALS,
    detect_provider_message,
)

__all__ = ["AlphaVantageClient", "SUPPORTED_INTERVALS", "detect_provider_message"]
