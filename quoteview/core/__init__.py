"""quoteview core: normalization, projection and display state."""

from quoteview.core.config.settings import ConfigManager, QuoteViewConfig
from quoteview.core.display import IntradayDisplay
from quoteview.core.models import (
    CandlestickPoint,
    CandlestickSeries,
    Metadata,
    OHLCVRecord,
    SeriesEntry,
    TimeSeriesModel,
)
from quoteview.core.normalizer import parse, parse_or_raise
from quoteview.core.projector import project, sort_chronologically

__all__ = [
    "ConfigManager",
    "QuoteViewConfig",
    "IntradayDisplay",
    "Metadata",
    "OHLCVRecord",
    "SeriesEntry",
    "TimeSeriesModel",
    "CandlestickPoint",
    "CandlestickSeries",
    "parse",
    "parse_or_raise",
    "project",
    "sort_chronologically",
]
