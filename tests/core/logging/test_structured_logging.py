"""Tests for structured logging with trace propagation."""

from __future__ import annotations

import io
import json

import pytest
from pydantic import ValidationError

from quoteview.core.logging import LogConfig, configure_logging, get_logger, log_context
from quoteview.core.normalizer import parse


def _read_records(stream: io.StringIO) -> list[dict[str, object]]:
    lines = [line for line in stream.getvalue().splitlines() if line.strip()]
    return [json.loads(line) for line in lines]


def test_structured_log_contains_trace_and_context() -> None:
    buffer = io.StringIO()
    configure_logging(console_stream=buffer)

    with log_context(trace_id="trace-123", provider="alpha_vantage", error_code="SHAPE_ERROR", request_id="req-42"):
        get_logger("tests").info("normalization complete", symbol="IBM")

    records = _read_records(buffer)
    assert len(records) == 1
    record = records[0]
    assert record["level"] == "INFO"
    assert record["message"] == "normalization complete"
    assert record["trace_id"] == "trace-123"
    assert record["provider"] == "alpha_vantage"
    assert record["error_code"] == "SHAPE_ERROR"
    assert record["context"]["request_id"] == "req-42"
    assert record["context"]["symbol"] == "IBM"
    assert record["context"]["logger_name"] == "tests"


def test_trace_id_propagates_within_context() -> None:
    buffer = io.StringIO()
    configure_logging(console_stream=buffer)
    logger = get_logger()

    with log_context() as trace_id:
        logger.info("first event")
        logger.info("second event")

    records = _read_records(buffer)
    assert records[0]["trace_id"] == records[1]["trace_id"] == trace_id


def test_nested_context_merges_and_restores() -> None:
    buffer = io.StringIO()
    configure_logging(console_stream=buffer)
    logger = get_logger()

    with log_context(command="intraday") as outer:
        with log_context(trace_id="inner", symbol="IBM"):
            logger.info("inner event")
        logger.info("outer event")

    inner, after = _read_records(buffer)
    assert inner["trace_id"] == "inner"
    assert inner["context"] == {"command": "intraday", "symbol": "IBM"}
    assert after["trace_id"] == outer
    assert after["context"] == {"command": "intraday"}


def test_level_filters_records() -> None:
    buffer = io.StringIO()
    configure_logging(level="WARNING", console_stream=buffer)

    get_logger().info("hidden")
    get_logger().warning("shown")

    records = _read_records(buffer)
    assert [record["message"] for record in records] == ["shown"]


def test_reconfigure_updates_level() -> None:
    buffer = io.StringIO()
    configure_logging(level="ERROR", console_stream=buffer)

    configure_logging(level="info", console_stream=buffer)
    get_logger().info("visible after reconfigure")

    assert _read_records(buffer)[0]["message"] == "visible after reconfigure"


def test_unknown_level_rejected() -> None:
    with pytest.raises(ValidationError):
        LogConfig(level="VERBOSE")


def test_rejected_payload_logged_at_debug() -> None:
    buffer = io.StringIO()
    configure_logging(level="DEBUG", console_stream=buffer)

    assert parse({"Meta Data": {}}) is None

    records = _read_records(buffer)
    assert records[-1]["level"] == "DEBUG"
    assert records[-1]["error_code"] == "SHAPE_ERROR"
    assert "Intraday payload rejected" in records[-1]["message"]
