"""quoteview - intraday quote viewer.

Normalizes Alpha Vantage intraday payloads into typed time series and
projects them into candlestick chart series.
"""

from quoteview.core.models import (
    CandlestickPoint,
    CandlestickSeries,
    Metadata,
    OHLCVRecord,
    SeriesEntry,
    TimeSeriesModel,
)
from quoteview.core.normalizer import parse
from quoteview.core.projector import project

__version__ = "0.1.0"

__all__ = [
    "Metadata",
    "OHLCVRecord",
    "SeriesEntry",
    "TimeSeriesModel",
    "CandlestickPoint",
    "CandlestickSeries",
    "parse",
    "project",
    "__version__",
]
