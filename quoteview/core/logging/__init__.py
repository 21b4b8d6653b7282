"""Logging utilities for monitoring and debugging."""

from quoteview.core.logging.config import LOG_LEVELS, LogConfig
from quoteview.core.logging.logger import (
    configure_logging,
    get_logger,
    log_context,
    logger,
)

__all__ = [
    "LOG_LEVELS",
    "LogConfig",
    "get_logger",
    "configure_logging",
    "log_context",
    "logger",
]
