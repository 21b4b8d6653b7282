"""Candlestick chart models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_serializer


class CandlestickPoint(BaseModel):
    """Chart input unit: x is the timestamp, y is ``[open, high, low, close]``."""

    model_config = ConfigDict(frozen=True)

    x: datetime | None
    y: tuple[float, float, float, float]

    @field_serializer("x", when_used="json")
    def serialize_x(self, value: datetime | None) -> str | None:
        """Serialize datetime to isoformat string."""
        return value.isoformat() if value is not None else None


class CandlestickSeries(BaseModel):
    """A single unnamed series as accepted by OHLC chart widgets."""

    model_config = ConfigDict(frozen=True)

    data: tuple[CandlestickPoint, ...] = ()
