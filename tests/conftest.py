"""Pytest configuration for the quoteview test suite."""

from __future__ import annotations

import copy
from typing import Any

import pytest

SAMPLE_PAYLOAD: dict[str, Any] = {
    "Meta Data": {
        "1. Information": "Intraday (5min) open, high, low, close prices and volume",
        "2. Symbol": "IBM",
        "3. Last Refreshed": "2024-01-01 20:00:00",
        "4. Interval": "5min",
        "5. Output Size": "Compact",
        "6. Time Zone": "US/Eastern",
    },
    "Time Series (5min)": {
        "2024-01-01 20:00:00": {
            "1. open": "100.0",
            "2. high": "101.0",
            "3. low": "99.5",
            "4. close": "100.5",
            "5. volume": "1000",
        },
        "2024-01-01 19:55:00": {
            "1. open": "99.8",
            "2. high": "100.2",
            "3. low": "99.6",
            "4. close": "100.0",
            "5. volume": "850",
        },
        "2024-01-01 19:50:00": {
            "1. open": "99.9",
            "2. high": "100.1",
            "3. low": "99.4",
            "4. close": "99.8",
            "5. volume": "1200",
        },
    },
}


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register command-line options for controlling integration tests."""

    parser.addoption(
        "--quoteview-run-integration",
        action="store_true",
        default=False,
        help="Run quoteview integration tests that call the live quote provider.",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip integration tests unless explicitly requested."""

    if config.getoption("--quoteview-run-integration"):
        return

    skip_integration = pytest.mark.skip(reason="integration tests require --quoteview-run-integration")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


@pytest.fixture
def intraday_payload() -> dict[str, Any]:
    """A fresh copy of a three-bar IBM payload, newest first."""

    return copy.deepcopy(SAMPLE_PAYLOAD)
