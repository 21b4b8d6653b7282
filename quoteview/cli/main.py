"""Main entry point for the quoteview command line interface."""

from __future__ import annotations

from pathlib import Path

import typer

from quoteview.core.logging import LOG_LEVELS, configure_logging, log_context

from .intraday import register as register_intraday_commands
from .output import create_renderer


def create_app() -> typer.Typer:
    """Create a Typer application instance for quoteview."""

    app = typer.Typer(add_completion=False, help="quoteview command line interface")

    @app.callback()
    def main(
        ctx: typer.Context,
        format: str = typer.Option(
            "table",
            "--format",
            "-f",
            help="Output format (table or jsonl).",
            show_default=True,
        ),
        output: Path | None = typer.Option(
            None,
            "--output",
            "-o",
            help="Write output to a file instead of stdout.",
        ),
        log_level: str | None = typer.Option(
            None,
            "--log-level",
            help="Logging level, defaults to the configured one.",
        ),
        no_color: bool = typer.Option(
            False,
            "--no-color",
            help="Disable colorized output for table format.",
        ),
    ) -> None:
        ctx.ensure_object(dict)
        normalized_format = format.strip().lower()
        try:
            create_renderer(normalized_format, no_color=no_color)
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--format") from exc

        normalized_level = log_level.strip().upper() if log_level else None
        if normalized_level is not None and normalized_level not in LOG_LEVELS:
            raise typer.BadParameter(
                f"Unsupported log level '{log_level}'. Available levels: {', '.join(LOG_LEVELS)}.",
                param_hint="--log-level",
            )

        ctx.obj.update(
            {
                "format": normalized_format,
                "output_path": output,
                "log_level": normalized_level,
                "no_color": no_color,
            }
        )
        if normalized_level is not None:
            configure_logging(level=normalized_level)
        ctx.with_resource(log_context(command=ctx.invoked_subcommand))

    register_intraday_commands(app)
    return app


app = create_app()
