"""Intraday time series models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_serializer


class Metadata(BaseModel):
    """Descriptive fields reported by the provider, kept verbatim."""

    model_config = ConfigDict(frozen=True)

    information: str
    symbol: str
    last_refreshed: str
    interval: str
    output_size: str
    time_zone: str


class OHLCVRecord(BaseModel):
    """One OHLCV observation holding both the provider text and its numeric value.

    Numeric fields are NaN when the matching text is not a number.
    """

    model_config = ConfigDict(frozen=True)

    open_str: str
    high_str: str
    low_str: str
    close_str: str
    volume_str: str

    open: float
    high: float
    low: float
    close: float
    volume: float


class SeriesEntry(BaseModel):
    """A provider timestamp key paired with its parsed value and record.

    ``time`` is ``None`` when the key could not be parsed as a date.
    """

    model_config = ConfigDict(frozen=True)

    time_str: str
    time: datetime | None
    data: OHLCVRecord

    @field_serializer("time", when_used="json")
    def serialize_time(self, value: datetime | None) -> str | None:
        """Serialize datetime to isoformat string."""
        return value.isoformat() if value is not None else None


class TimeSeriesModel(BaseModel):
    """Metadata plus the ordered intraday series.

    Entries keep the order in which the provider emitted them.
    """

    model_config = ConfigDict(frozen=True)

    metadata: Metadata | None = None
    series: tuple[SeriesEntry, ...] | None = None
