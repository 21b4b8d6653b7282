"""Configuration management for the quoteview client and CLI."""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from quoteview.core.exceptions import ConfigurationError
from quoteview.core.logging.config import LOG_LEVELS

DEFAULT_CONFIG_PATH = Path.home() / ".quoteview" / "config.toml"


@dataclass
class ProviderConfig:
    """Quote provider configuration."""

    base_url: str = "https://www.alphavantage.co/query"
    # Alpha Vantage's public demo key only serves a handful of symbols (IBM among them)
    api_key: str = "demo"
    timeout: float = 30.0

    def __post_init__(self) -> None:
        if not self.base_url:
            raise ConfigurationError("base_url cannot be empty", source="providers.base_url")
        if self.timeout <= 0:
            raise ConfigurationError("timeout must be positive", source="providers.timeout")


@dataclass
class DisplayConfig:
    """Default query shown by the CLI."""

    symbol: str = "IBM"
    interval: str = "5min"


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    file: str | None = None

    def __post_init__(self) -> None:
        level = str(self.level).strip().upper()
        if level not in LOG_LEVELS:
            raise ConfigurationError(
                f"Unknown log level '{self.level}'. Available levels: {', '.join(LOG_LEVELS)}.",
                source="logging.level",
            )
        self.level = level


@dataclass
class QuoteViewConfig:
    """Top level quoteview configuration."""

    providers: ProviderConfig = field(default_factory=ProviderConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "QuoteViewConfig":
        """Build a configuration from a nested dictionary."""
        try:
            return cls(
                providers=ProviderConfig(**config_dict.get("providers", {})),
                display=DisplayConfig(**config_dict.get("display", {})),
                logging=LoggingConfig(**config_dict.get("logging", {})),
            )
        except TypeError as exc:
            raise ConfigurationError(f"Unknown configuration option: {exc}") from exc


class ConfigManager:
    """Loads configuration from a TOML file and the environment."""

    def __init__(self, config_path: Path | None = None, environ: dict[str, str] | None = None):
        """Initialise the manager.

        Args:
            config_path: TOML file to read, defaults to ``~/.quoteview/config.toml``
            environ: environment mapping, defaults to ``os.environ``
        """
        self.config_path = config_path or DEFAULT_CONFIG_PATH
        self._environ = os.environ if environ is None else environ
        self.config = self._load_config()

    def _load_config(self) -> QuoteViewConfig:
        config_dict: dict[str, Any] = {}
        if self.config_path.exists():
            try:
                with open(self.config_path, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as exc:
                raise ConfigurationError(
                    f"Failed to load config from {self.config_path}: {exc}",
                    source=str(self.config_path),
                ) from exc

        _deep_update(config_dict, load_config_from_env(self._environ))
        return QuoteViewConfig.from_dict(config_dict)

    def get_config(self) -> QuoteViewConfig:
        """Return the current configuration."""
        return self.config


def _deep_update(d: dict[str, Any], u: dict[str, Any]) -> dict[str, Any]:
    for k, v in u.items():
        if isinstance(v, dict):
            d[k] = _deep_update(d.get(k, {}), v)
        else:
            d[k] = v
    return d


def load_config_from_env(environ: dict[str, str] | None = None) -> dict[str, Any]:
    """Collect configuration overrides from ``QUOTEVIEW_*`` environment variables."""
    env = os.environ if environ is None else environ
    config: dict[str, Any] = {}

    provider_config: dict[str, Any] = {}
    if env.get("QUOTEVIEW_API_KEY"):
        provider_config["api_key"] = env["QUOTEVIEW_API_KEY"]
    if env.get("QUOTEVIEW_BASE_URL"):
        provider_config["base_url"] = env["QUOTEVIEW_BASE_URL"]
    timeout = env.get("QUOTEVIEW_TIMEOUT")
    if timeout is not None:
        try:
            provider_config["timeout"] = float(timeout)
        except ValueError as exc:
            raise ConfigurationError(
                f"QUOTEVIEW_TIMEOUT must be a number, got {timeout!r}",
                source="QUOTEVIEW_TIMEOUT",
            ) from exc
    if provider_config:
        config["providers"] = provider_config

    display_config: dict[str, Any] = {}
    if env.get("QUOTEVIEW_SYMBOL"):
        display_config["symbol"] = env["QUOTEVIEW_SYMBOL"]
    if env.get("QUOTEVIEW_INTERVAL"):
        display_config["interval"] = env["QUOTEVIEW_INTERVAL"]
    if display_config:
        config["display"] = display_config

    logging_config: dict[str, Any] = {}
    if env.get("QUOTEVIEW_LOG_LEVEL"):
        logging_config["level"] = env["QUOTEVIEW_LOG_LEVEL"]
    if env.get("QUOTEVIEW_LOG_FILE"):
        logging_config["file"] = env["QUOTEVIEW_LOG_FILE"]
    if logging_config:
        config["logging"] = logging_config

    return config
