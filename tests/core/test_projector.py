"""Tests for candlestick projection."""

from __future__ import annotations

import math
from datetime import datetime

from quoteview.core.models import CandlestickSeries, TimeSeriesModel
from quoteview.core.normalizer import parse
from quoteview.core.projector import project, sort_chronologically


def test_scenario_point(intraday_payload):
    model = parse(intraday_payload)

    series = project(model)

    point = series[0].data[0]
    assert point.x == datetime(2024, 1, 1, 20, 0, 0)
    assert point.y == (100.0, 101.0, 99.5, 100.5)


def test_single_outer_series_with_one_point_per_entry(intraday_payload):
    model = parse(intraday_payload)

    series = project(model)

    assert len(series) == 1
    assert isinstance(series[0], CandlestickSeries)
    assert len(series[0].data) == len(model.series)


def test_point_order_matches_model_order(intraday_payload):
    model = parse(intraday_payload)

    points = project(model)[0].data

    assert [point.x for point in points] == [entry.time for entry in model.series]


def test_absent_series_projects_to_empty_points():
    series = project(TimeSeriesModel())

    assert len(series) == 1
    assert series[0].data == ()


def test_empty_series_projects_to_empty_points(intraday_payload):
    intraday_payload["Time Series (5min)"] = {}

    series = project(parse(intraday_payload))

    assert len(series) == 1
    assert series[0].data == ()


def test_volume_is_dropped_and_nan_carried(intraday_payload):
    intraday_payload["Time Series (5min)"]["2024-01-01 20:00:00"]["1. open"] = "bad"

    point = project(parse(intraday_payload))[0].data[0]

    assert len(point.y) == 4
    assert math.isnan(point.y[0])
    assert point.y[1:] == (101.0, 99.5, 100.5)


def test_invalid_timestamp_projects_to_missing_x(intraday_payload):
    series = intraday_payload["Time Series (5min)"]
    series["garbage"] = series.pop("2024-01-01 19:50:00")

    points = project(parse(intraday_payload))[0].data

    assert points[-1].x is None


def test_projection_is_recomputed_not_shared(intraday_payload):
    model = parse(intraday_payload)

    assert project(model) == project(model)
    assert project(model) is not project(model)


def test_json_shape(intraday_payload):
    model = parse(intraday_payload)

    dumped = [item.model_dump(mode="json") for item in project(model)]

    assert dumped[0]["data"][0] == {"x": "2024-01-01T20:00:00", "y": [100.0, 101.0, 99.5, 100.5]}


class TestSortChronologically:
    """Opt-in chronological ordering."""

    def test_sorts_oldest_first(self, intraday_payload):
        model = sort_chronologically(parse(intraday_payload))

        assert [entry.time_str for entry in model.series] == [
            "2024-01-01 19:50:00",
            "2024-01-01 19:55:00",
            "2024-01-01 20:00:00",
        ]

    def test_invalid_dates_go_last_in_original_order(self, intraday_payload):
        series = intraday_payload["Time Series (5min)"]
        series["zzz"] = series.pop("2024-01-01 20:00:00")
        series["aaa"] = series.pop("2024-01-01 19:55:00")

        model = sort_chronologically(parse(intraday_payload))

        assert [entry.time_str for entry in model.series] == ["2024-01-01 19:50:00", "zzz", "aaa"]

    def test_does_not_modify_input(self, intraday_payload):
        model = parse(intraday_payload)
        original = [entry.time_str for entry in model.series]

        sort_chronologically(model)

        assert [entry.time_str for entry in model.series] == original

    def test_absent_series(self):
        model = TimeSeriesModel()
        assert sort_chronologically(model) is model
