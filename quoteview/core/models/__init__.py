"""Data models."""

from quoteview.core.models.chart import CandlestickPoint, CandlestickSeries
from quoteview.core.models.intraday import Metadata, OHLCVRecord, SeriesEntry, TimeSeriesModel

__all__ = [
    "Metadata",
    "OHLCVRecord",
    "SeriesEntry",
    "TimeSeriesModel",
    "CandlestickPoint",
    "CandlestickSeries",
]
