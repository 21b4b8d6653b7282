"""Intraday command implementations for the quoteview CLI."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

import typer

from quoteview.core.config import ConfigManager, ProviderConfig, QuoteViewConfig
from quoteview.core.display import IntradayDisplay
from quoteview.core.exceptions import ConfigurationError, NetworkError, ProviderError, QuoteViewError
from quoteview.core.logging import configure_logging
from quoteview.core.projector import sort_chronologically
from quoteview.core.providers import SUPPORTED_INTERVALS, AlphaVantageClient

from .constants import NETWORK_EXIT_CODE, PROVIDER_EXIT_CODE, VALIDATION_EXIT_CODE
from .output import create_renderer, emit_error, open_output

intraday_app = typer.Typer(help="Intraday quote operations.")


def register(app: typer.Typer) -> None:
    """Register the intraday command group on the provided application."""

    app.add_typer(intraday_app, name="intraday", help="Show intraday time series")


def get_config() -> QuoteViewConfig:
    """Factory hook for obtaining the active configuration."""

    return ConfigManager().get_config()


def get_client(config: ProviderConfig) -> AlphaVantageClient:
    """Factory hook for obtaining a quote client."""

    return AlphaVantageClient(config)


@intraday_app.command("show")
def show_command(
    ctx: typer.Context,
    symbol: str | None = typer.Option(None, "--symbol", "-s", help="Ticker to fetch."),
    interval: str | None = typer.Option(None, "--interval", "-i", help="Bar interval, e.g. 5min."),
    api_key: str | None = typer.Option(None, "--api-key", help="Alpha Vantage API key."),
    chart: bool = typer.Option(False, "--chart", help="Also print candlestick points."),
    sort: bool = typer.Option(False, "--sort", help="Order entries oldest first."),
) -> None:
    """Fetch an intraday series and render it."""

    config = _resolve_config(ctx)
    resolved_symbol = (symbol or config.display.symbol).strip().upper()
    resolved_interval = _validate_interval(interval or config.display.interval)
    provider_config = config.providers
    if api_key:
        provider_config = ProviderConfig(
            base_url=provider_config.base_url,
            api_key=api_key,
            timeout=provider_config.timeout,
        )

    display = IntradayDisplay()
    asyncio.run(_refresh(display, provider_config, resolved_symbol, resolved_interval))
    _finish(ctx, display, chart, sort)


@intraday_app.command("parse")
def parse_command(
    ctx: typer.Context,
    payload_path: Path = typer.Argument(..., help="Saved provider JSON payload."),
    interval: str | None = typer.Option(None, "--interval", "-i", help="Interval the payload was fetched with."),
    chart: bool = typer.Option(False, "--chart", help="Also print candlestick points."),
    sort: bool = typer.Option(False, "--sort", help="Order entries oldest first."),
) -> None:
    """Render a previously saved intraday payload without fetching."""

    config = _resolve_config(ctx)
    resolved_interval = _validate_interval(interval or config.display.interval)
    try:
        payload = json.loads(payload_path.read_text(encoding="utf-8"))
    except OSError as exc:
        emit_error(f"Unable to read payload file '{payload_path}': {exc}", "PAYLOAD_FILE_ERROR")
        raise typer.Exit(code=VALIDATION_EXIT_CODE) from exc
    except json.JSONDecodeError as exc:
        emit_error(f"Payload file '{payload_path}' is not valid JSON: {exc}", "PAYLOAD_DECODE_ERROR")
        raise typer.Exit(code=VALIDATION_EXIT_CODE) from exc

    display = IntradayDisplay()
    display.apply_payload(payload, resolved_interval)
    _finish(ctx, display, chart, sort)


async def _refresh(display: IntradayDisplay, config: ProviderConfig, symbol: str, interval: str) -> None:
    async with get_client(config) as client:
        await display.refresh(client, symbol, interval)


def _resolve_config(ctx: typer.Context) -> QuoteViewConfig:
    try:
        config = get_config()
    except ConfigurationError as error:
        emit_error(error.message, error.error_code, details=error.details)
        raise typer.Exit(code=VALIDATION_EXIT_CODE) from error

    ctx.ensure_object(dict)
    if ctx.obj.get("log_level") is None:
        configure_logging(
            level=config.logging.level,
            file_output=bool(config.logging.file),
            file_path=config.logging.file,
        )
    return config


def _validate_interval(interval: str) -> str:
    normalized = interval.strip().lower()
    if normalized not in SUPPORTED_INTERVALS:
        emit_error(
            f"Unsupported interval '{interval}'. Available intervals: {', '.join(SUPPORTED_INTERVALS)}.",
            "INVALID_INTERVAL",
        )
        raise typer.Exit(code=VALIDATION_EXIT_CODE)
    return normalized


def _exit_code(failure: QuoteViewError) -> int:
    if isinstance(failure, NetworkError):
        return NETWORK_EXIT_CODE
    if isinstance(failure, ProviderError):
        return PROVIDER_EXIT_CODE
    return VALIDATION_EXIT_CODE


def _finish(ctx: typer.Context, display: IntradayDisplay, chart: bool, sort: bool) -> None:
    # a fresh display has no earlier model to fall back on
    if display.failure is not None:
        failure = display.failure
        emit_error(failure.message, failure.error_code, details=failure.details)
        raise typer.Exit(code=_exit_code(failure))

    if sort and display.model is not None:
        display.model = sort_chronologically(display.model)

    options = ctx.obj or {}
    renderer = create_renderer(options.get("format", "table"), no_color=bool(options.get("no_color")))
    with open_output(options.get("output_path")) as stream:
        renderer.render(display, stream, chart=chart)
