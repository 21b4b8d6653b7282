"""Configuration management module."""

from quoteview.core.config.settings import (
    ConfigManager,
    DisplayConfig,
    LoggingConfig,
    ProviderConfig,
    QuoteViewConfig,
    load_config_from_env,
)

__all__ = [
    "ConfigManager",
    "QuoteViewConfig",
    "ProviderConfig",
    "DisplayConfig",
    "LoggingConfig",
    "load_config_from_env",
]
