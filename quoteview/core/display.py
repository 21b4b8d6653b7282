"""
Display state for an intraday quote view.

:class:`IntradayDisplay` owns the current :class:`TimeSeriesModel` and the
user-visible error message. It is the only stateful piece; the normalizer and
projector it calls are pure functions.
"""

from __future__ import annotations

from typing import Any

from quoteview.core.exceptions import (
    PayloadShapeError,
    ProviderError,
    ProviderMessageError,
    QuoteViewError,
)
from quoteview.core.logging import get_logger
from quoteview.core.models import CandlestickSeries, TimeSeriesModel
from quoteview.core.normalizer import DEFAULT_INTERVAL, parse_or_raise
from quoteview.core.projector import project
from quoteview.core.providers.alpha_vantage import PROVIDER_NAME, AlphaVantageClient, detect_provider_message

logger = get_logger(__name__)

SUMMARY_LABELS = (
    ("Information", "information"),
    ("Symbol", "symbol"),
    ("Last Refreshed", "last_refreshed"),
    ("Interval", "interval"),
    ("Output Size", "output_size"),
    ("Time Zone", "time_zone"),
)


class IntradayDisplay:
    """Holds what is currently shown: the last good model and an error message.

    ``failure`` keeps the error behind the most recent unsuccessful update and
    is reset by every successful one.
    """

    def __init__(self) -> None:
        self.model: TimeSeriesModel | None = None
        self.error: str = ""
        self.failure: QuoteViewError | None = None

    def apply_payload(self, payload: Any, interval: str = DEFAULT_INTERVAL) -> TimeSeriesModel | None:
        """Update the display from a decoded provider payload.

        A provider message replaces the model with nothing and becomes the
        error text. A payload that fails to parse leaves the previous model in
        place. A good payload replaces the model wholesale.
        """
        message = detect_provider_message(payload)
        if message is not None:
            logger.warning("Provider reported an error instead of data", error_code="PROVIDER_MESSAGE")
            self.error = message
            self.model = None
            self.failure = ProviderMessageError(message, provider_name=PROVIDER_NAME)
            return None

        self.error = ""
        try:
            model = parse_or_raise(payload, interval)
        except PayloadShapeError as exc:
            logger.warning(
                "Intraday payload could not be parsed; keeping previous data: {}",
                exc.message,
                error_code=exc.error_code,
            )
            self.failure = exc
            return self.model

        self.model = model
        self.failure = None
        logger.info(
            "Intraday series loaded",
            symbol=model.metadata.symbol if model.metadata else None,
            entries=len(model.series or ()),
        )
        return model

    async def refresh(self, client: AlphaVantageClient, symbol: str, interval: str = DEFAULT_INTERVAL) -> TimeSeriesModel | None:
        """Fetch once and apply the result; a failed fetch leaves state unchanged."""
        try:
            payload = await client.fetch_intraday(symbol, interval)
        except ProviderError as exc:
            logger.error("Error fetching data: {}", exc.message, provider=exc.provider_name, error_code=exc.error_code)
            self.failure = exc
            return self.model
        return self.apply_payload(payload, interval)

    def candlesticks(self) -> list[CandlestickSeries]:
        """Chart series for the current model; empty when nothing is loaded."""
        if self.model is None:
            return []
        return project(self.model)

    def summary_rows(self) -> list[dict[str, object]]:
        """Label/value rows for the metadata panel."""
        metadata = self.model.metadata if self.model else None
        return [
            {"field": label, "value": getattr(metadata, attr) if metadata else None}
            for label, attr in SUMMARY_LABELS
        ]

    def series_rows(self) -> list[dict[str, object]]:
        """One row per series entry using the provider's raw text."""
        if self.model is None:
            return []
        return [
            {
                "time": entry.time_str,
                "open": entry.data.open_str,
                "high": entry.data.high_str,
                "low": entry.data.low_str,
                "close": entry.data.close_str,
                "volume": entry.data.volume_str,
            }
            for entry in self.model.series or ()
        ]


__all__ = ["IntradayDisplay"]
