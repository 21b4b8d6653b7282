"""Tests for CLI renderers."""

from __future__ import annotations

import io
import json

import pytest

from quoteview.cli.output import (
    IntradayRenderer,
    JSONLRenderer,
    TableRenderer,
    candlestick_rows,
    create_renderer,
)
from quoteview.core.display import IntradayDisplay


def _strict_loads(line: str) -> dict[str, object]:
    def reject(constant: str) -> None:
        raise ValueError(f"non-standard JSON constant {constant}")

    return json.loads(line, parse_constant=reject)


def test_candlestick_rows(intraday_payload):
    display = IntradayDisplay()
    display.apply_payload(intraday_payload)

    rows = candlestick_rows(display.candlesticks())

    assert rows[0] == {"x": "2024-01-01T20:00:00", "y": [100.0, 101.0, 99.5, 100.5]}
    assert len(rows) == 3


def test_renderer_base_is_abstract():
    with pytest.raises(TypeError):
        IntradayRenderer()


def test_create_renderer():
    assert isinstance(create_renderer("table"), TableRenderer)
    assert isinstance(create_renderer(" JSONL "), JSONLRenderer)
    with pytest.raises(ValueError, match="Unsupported format"):
        create_renderer("xml")


def test_jsonl_writes_null_for_unparsable_numbers(intraday_payload):
    intraday_payload["Time Series (5min)"]["2024-01-01 20:00:00"]["1. open"] = "bad"
    intraday_payload["Time Series (5min)"]["2024-01-01 19:55:00"]["4. close"] = "Infinity"
    display = IntradayDisplay()
    display.apply_payload(intraday_payload)
    stream = io.StringIO()

    JSONLRenderer().render(display, stream, chart=True)

    rows = [_strict_loads(line) for line in stream.getvalue().splitlines()]
    candles = [row for row in rows if row["section"] == "candlestick"]
    assert candles[0]["y"] == [None, 101.0, 99.5, 100.5]
    assert candles[1]["y"][3] is None
    series = [row for row in rows if row["section"] == "series"]
    assert series[0]["open"] == "bad"


def test_jsonl_without_chart_has_no_candlesticks(intraday_payload):
    display = IntradayDisplay()
    display.apply_payload(intraday_payload)
    stream = io.StringIO()

    JSONLRenderer().render(display, stream)

    sections = {json.loads(line)["section"] for line in stream.getvalue().splitlines()}
    assert sections == {"summary", "series"}


def test_table_marks_missing_values(intraday_payload):
    intraday_payload["Time Series (5min)"]["2024-01-01 20:00:00"]["1. open"] = "bad"
    series = intraday_payload["Time Series (5min)"]
    series["not a date"] = series.pop("2024-01-01 19:50:00")
    display = IntradayDisplay()
    display.apply_payload(intraday_payload)
    stream = io.StringIO()

    TableRenderer(no_color=True).render(display, stream, chart=True)

    output = stream.getvalue()
    assert "NaN, 101.0, 99.5, 100.5" in output
    assert "candlestick" in output


def test_table_without_model_reports_no_data():
    stream = io.StringIO()

    TableRenderer(no_color=True).render(IntradayDisplay(), stream)

    assert "No data available." in stream.getvalue()
