"""Projection of intraday models into candlestick chart series."""

from __future__ import annotations

from datetime import datetime

from quoteview.core.models import CandlestickPoint, CandlestickSeries, SeriesEntry, TimeSeriesModel


def to_point(entry: SeriesEntry) -> CandlestickPoint:
    """Project one series entry; volume is dropped."""
    data = entry.data
    return CandlestickPoint(x=entry.time, y=(data.open, data.high, data.low, data.close))


def project(model: TimeSeriesModel) -> list[CandlestickSeries]:
    """Return exactly one candlestick series with one point per entry, in model order.

    An absent series projects to a series with no points.
    """
    points = tuple(to_point(entry) for entry in model.series or ())
    return [CandlestickSeries(data=points)]


def sort_chronologically(model: TimeSeriesModel) -> TimeSeriesModel:
    """Return a copy of ``model`` with entries ordered oldest first.

    Entries whose timestamp could not be parsed keep their relative order and
    go last.
    """
    if model.series is None:
        return model

    def _key(entry: SeriesEntry) -> tuple[bool, datetime]:
        return (entry.time is None, entry.time or datetime.min)

    return model.model_copy(update={"series": tuple(sorted(model.series, key=_key))})


__all__ = ["project", "sort_chronologically", "to_point"]
