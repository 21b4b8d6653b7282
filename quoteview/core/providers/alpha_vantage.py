"""
Alpha Vantage intraday quote client.

Fetches ``TIME_SERIES_INTRADAY`` payloads as decoded JSON. Parsing is left
to :mod:`quoteview.core.normalizer`; this module only knows how to ask for
data and how to recognise the provider's message-instead-of-data replies.
"""

from __future__ import annotations

from typing import Any

import httpx

from quoteview.core.config import ProviderConfig
from quoteview.core.exceptions import NetworkError, ProviderError
from quoteview.core.logging import get_logger

logger = get_logger(__name__)

PROVIDER_NAME = "alpha_vantage"
INTRADAY_FUNCTION = "TIME_SERIES_INTRADAY"
SUPPORTED_INTERVALS = ("1min", "5min", "15min", "30min", "60min")

# Top-level members Alpha Vantage sends in place of data: "Information" for
# premium/demo-key notices, "Note" for rate limiting, "Error Message" for bad calls.
MESSAGE_FIELDS = ("Information", "Note", "Error Message")


def detect_provider_message(payload: Any) -> str | None:
    """Return the provider's message when ``payload`` is an error-shaped reply."""
    if not isinstance(payload, dict):
        return None
    for field in MESSAGE_FIELDS:
        message = payload.get(field)
        if isinstance(message, str) and message:
            return message
    return None


class AlphaVantageClient:
    """Minimal async client for the intraday endpoint.

    A caller supplied ``httpx.AsyncClient`` is used as-is and left open on
    exit; otherwise the client owns and closes its own.
    """

    def __init__(self, config: ProviderConfig | None = None, http_client: httpx.AsyncClient | None = None):
        self.config = config or ProviderConfig()
        self._client = http_client
        self._owns_client = http_client is None

    @property
    def name(self) -> str:
        """Provider name identifier."""
        return PROVIDER_NAME

    async def __aenter__(self) -> "AlphaVantageClient":
        self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.config.timeout),
                follow_redirects=True,
                headers={"User-Agent": "quoteview/0.1.0"},
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def build_params(self, symbol: str, interval: str) -> dict[str, str]:
        """Build query parameters for an intraday request."""
        return {
            "function": INTRADAY_FUNCTION,
            "symbol": symbol,
            "interval": interval,
            "apikey": self.config.api_key,
        }

    async def fetch_intraday(self, symbol: str, interval: str) -> dict[str, Any]:
        """Fetch one intraday payload.

        Raises:
            NetworkError: transport failure or non-2xx status
            ProviderError: the body is not a JSON object
        """
        client = self._ensure_client()
        params = self.build_params(symbol, interval)
        logger.debug("Requesting intraday series", provider=self.name, symbol=symbol, interval=interval)

        try:
            response = await client.get(self.config.base_url, params=params)
        except httpx.HTTPError as exc:
            raise NetworkError(
                f"Request to Alpha Vantage failed: {exc}",
                provider_name=self.name,
                details={"error_type": type(exc).__name__},
            ) from exc

        if not response.is_success:
            raise NetworkError(
                f"HTTP error! Status: {response.status_code}",
                provider_name=self.name,
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise ProviderError(
                "Alpha Vantage returned a body that is not JSON",
                provider_name=self.name,
                error_code="INVALID_RESPONSE",
            ) from exc

        if not isinstance(payload, dict):
            raise ProviderError(
                f"Alpha Vantage returned a JSON {type(payload).__name__}, expected an object",
                provider_name=self.name,
                error_code="INVALID_RESPONSE",
            )
        return payload


__all__ = [
    "AlphaVantageClient",
    "MESSAGE_FIELDS",
    "PROVIDER_NAME",
    "SUPPORTED_INTERVALS",
    "detect_provider_message",
]
