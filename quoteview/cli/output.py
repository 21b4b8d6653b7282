"""Rendering of intraday display state and error payloads for the CLI."""

from __future__ import annotations

import json
import math
import sys
from abc import ABC, abstractmethod
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Mapping, Sequence, TextIO

import typer
from rich.box import SIMPLE
from rich.console import Console
from rich.table import Table

from quoteview.core.display import IntradayDisplay
from quoteview.core.models import CandlestickSeries

from .constants import VALIDATION_EXIT_CODE

SUMMARY_COLUMNS = ("field", "value")
SERIES_COLUMNS = ("time", "open", "high", "low", "close", "volume")
CANDLE_COLUMNS = ("x", "y")

OUTPUT_FORMATS = ("table", "jsonl")


def candlestick_rows(series: list[CandlestickSeries]) -> list[dict[str, object]]:
    """Flatten projected series into ``{"x", "y"}`` rows."""
    return [{"x": point.serialize_x(point.x), "y": list(point.y)} for item in series for point in item.data]


class IntradayRenderer(ABC):
    """Writes the summary, series and optional candlestick sections of a display."""

    name: str

    def render(self, display: IntradayDisplay, stream: TextIO, *, chart: bool = False) -> None:
        self.write_section("summary", SUMMARY_COLUMNS, display.summary_rows(), stream)
        self.write_section("series", SERIES_COLUMNS, display.series_rows(), stream)
        if chart:
            self.write_section("candlestick", CANDLE_COLUMNS, candlestick_rows(display.candlesticks()), stream)

    @abstractmethod
    def write_section(
        self,
        title: str,
        columns: Sequence[str],
        rows: Sequence[Mapping[str, object]],
        stream: TextIO,
    ) -> None:
        """Write one titled section."""


class TableRenderer(IntradayRenderer):
    """One Rich table per section."""

    name = "table"

    def __init__(self, no_color: bool = False) -> None:
        self.no_color = no_color

    def write_section(self, title, columns, rows, stream) -> None:
        console = Console(file=stream, color_system=None if self.no_color else "auto", no_color=self.no_color)
        table = Table(box=SIMPLE, title=title)
        for column in columns:
            table.add_column(column, header_style="" if self.no_color else "bold")
        for row in rows:
            table.add_row(*(_cell(row.get(column)) for column in columns))
        console.print(table)
        if not rows:
            console.print("No data available.")


class JSONLRenderer(IntradayRenderer):
    """One JSON object per row, tagged with its ``section``.

    Non-finite numbers have no JSON spelling and are written as ``null``.
    """

    name = "jsonl"

    def write_section(self, title, columns, rows, stream) -> None:
        for row in rows:
            record = {"section": title, **{column: _json_safe(row.get(column)) for column in columns}}
            stream.write(json.dumps(record, ensure_ascii=False, allow_nan=False, default=str))
            stream.write("\n")
        stream.flush()


def _cell(value: object) -> str:
    if value is None:
        return "-"
    if isinstance(value, float) and math.isnan(value):
        return "NaN"
    if isinstance(value, (list, tuple)):
        return ", ".join(_cell(item) for item in value)
    return str(value)


def _json_safe(value: object) -> object:
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, (list, tuple)):
        return [_json_safe(item) for item in value]
    return value


def create_renderer(name: str, *, no_color: bool = False) -> IntradayRenderer:
    """Instantiate a renderer by format name."""
    normalized = name.strip().lower()
    if normalized == "table":
        return TableRenderer(no_color=no_color)
    if normalized == "jsonl":
        return JSONLRenderer()
    raise ValueError(f"Unsupported format '{name}'. Available formats: {', '.join(OUTPUT_FORMATS)}.")


@contextmanager
def open_output(path: Path | None) -> Iterator[TextIO]:
    """Yield the file at ``path`` opened for writing, or stdout."""
    if path is None:
        yield sys.stdout
        return
    try:
        stream = open(path, "w", encoding="utf-8")
    except OSError as exc:
        emit_error(f"Unable to open '{path}': {exc}", "OUTPUT_WRITE_ERROR")
        raise typer.Exit(code=VALIDATION_EXIT_CODE) from exc
    with stream:
        yield stream


def emit_error(message: str, code: str, *, details: Mapping[str, object] | None = None) -> None:
    """Print a structured error payload to stderr."""
    payload: dict[str, object] = {"code": code, "message": message}
    if details:
        payload["details"] = dict(details)
    typer.echo(json.dumps(payload, ensure_ascii=False, default=str), err=True)


__all__ = [
    "IntradayRenderer",
    "JSONLRenderer",
    "OUTPUT_FORMATS",
    "TableRenderer",
    "candlestick_rows",
    "create_renderer",
    "emit_error",
    "open_output",
]
