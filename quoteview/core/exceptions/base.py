"""quoteview core exception classes."""

from typing import Any


class QuoteViewError(Exception):
    """Base exception for quoteview."""

    def __init__(
        self,
        message: str,
        error_code: str = "GENERAL_ERROR",
        details: dict[str, Any] | None = None,
    ):
        """Initialise the exception.

        Args:
            message: human readable error message
            error_code: stable machine readable code
            details: extra context for logs and CLI output
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class PayloadShapeError(QuoteViewError):
    """A provider payload is missing a member or has an unexpected structure."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        if path is not None:
            super_details["path"] = path
        super().__init__(message, "SHAPE_ERROR", super_details)
        self.path = path


class ProviderError(QuoteViewError):
    """Quote provider related failures."""

    def __init__(
        self,
        message: str,
        provider_name: str,
        error_code: str = "PROVIDER_ERROR",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, error_code, details)
        self.provider_name = provider_name


class ProviderMessageError(ProviderError):
    """The provider answered with an informational/error message instead of data."""

    def __init__(
        self,
        message: str,
        provider_name: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        if field:
            super_details["field"] = field
        super().__init__(message, provider_name, "PROVIDER_MESSAGE", super_details)
        self.field = field


class NetworkError(ProviderError):
    """Transport level failure talking to the provider."""

    def __init__(
        self,
        message: str,
        provider_name: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        if status_code is not None:
            super_details["status_code"] = status_code
        super().__init__(message, provider_name, "NETWORK_ERROR", super_details)
        self.status_code = status_code


class ConfigurationError(QuoteViewError):
    """Invalid or unreadable configuration."""

    def __init__(
        self,
        message: str,
        source: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        if source:
            super_details["source"] = source
        super().__init__(message, "CONFIG_ERROR", super_details)
