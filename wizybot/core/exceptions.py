"""
Custom exceptions for WizyBot.

This module provides the exception hierarchy for the service. All exceptions
inherit from WizyBotException and carry an error code so the API layer can
translate them into consistent error responses.

Failures fall into four groups:
- tool argument failures (malformed JSON, parameter validation)
- catalog failures
- currency conversion failures
- model gateway failures

Unknown tool names are not errors: the tool router reports them as a
ToolUnavailable outcome.
"""

from enum import Enum
from typing import Any, Optional


# =============================================================================
# Error Codes Enum
# =============================================================================


class ErrorCode(str, Enum):
    """Machine-readable error codes used in API responses and logs."""

    WIZYBOT_ERROR = "WIZYBOT_ERROR"
    MALFORMED_ARGUMENTS = "MALFORMED_ARGUMENTS"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    TOOL_NOT_FOUND = "TOOL_NOT_FOUND"
    CATALOG_READ_ERROR = "CATALOG_READ_ERROR"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    MISSING_CURRENCY_CODE = "MISSING_CURRENCY_CODE"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    UNSUPPORTED_CURRENCY = "UNSUPPORTED_CURRENCY"
    AUTHENTICATION_ERROR = "AUTHENTICATION_ERROR"
    RATE_LIMIT_ERROR = "RATE_LIMIT_ERROR"
    UPSTREAM_ERROR = "UPSTREAM_ERROR"
    MODEL_GATEWAY_ERROR = "MODEL_GATEWAY_ERROR"


# =============================================================================
# Base Exception
# =============================================================================


class WizyBotException(Exception):
    """
    Base exception for all WizyBot errors.

    Attributes:
        message: Human-readable error message.
        error_code: Machine-readable error code from ErrorCode enum.
    """

    default_error_code: ErrorCode = ErrorCode.WIZYBOT_ERROR

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Human-readable error message.
            error_code: Machine-readable error code (defaults per subclass).
            **kwargs: Additional attributes to set on the exception.
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.default_error_code

        for key, value in kwargs.items():
            setattr(self, key, value)


# =============================================================================
# Tool Argument Errors
# =============================================================================


class MalformedArgumentsError(WizyBotException):
    """
    Raised when the model emitted tool arguments that are not a JSON object.

    This is distinct from ToolValidationError: the payload could not be
    parsed at all, so no parameter contract was ever checked.

    Attributes:
        raw_arguments: The unparsable payload as received.
    """

    default_error_code = ErrorCode.MALFORMED_ARGUMENTS

    def __init__(
        self,
        message: str = "Malformed tool arguments from AI response.",
        raw_arguments: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.raw_arguments = raw_arguments


class ToolValidationError(WizyBotException):
    """
    Raised when parsed tool arguments violate a tool's parameter contract.

    Named ToolValidationError to avoid conflict with pydantic.ValidationError.

    Attributes:
        tool_name: Name of the tool whose parameters failed validation.
        violations: One message per invalid field.
    """

    default_error_code = ErrorCode.VALIDATION_ERROR

    def __init__(
        self,
        message: str,
        tool_name: Optional[str] = None,
        violations: Optional[list[str]] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.tool_name = tool_name
        self.violations = violations or []


class ToolNotFoundError(WizyBotException):
    """Raised when a tool is looked up that is not in the registry."""

    default_error_code = ErrorCode.TOOL_NOT_FOUND

    def __init__(self, tool_name: str) -> None:
        super().__init__(f"Tool not found: {tool_name}")
        self.tool_name = tool_name


# =============================================================================
# Catalog Errors
# =============================================================================


class CatalogReadError(WizyBotException):
    """
    Raised when the product catalog cannot be read at all.

    Attributes:
        path: Path of the catalog file.
    """

    default_error_code = ErrorCode.CATALOG_READ_ERROR

    def __init__(self, message: str, path: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.path = path


# =============================================================================
# Currency Conversion Errors
# =============================================================================


class CurrencyConversionError(WizyBotException):
    """Base class for currency conversion failures."""


class InvalidAmountError(CurrencyConversionError):
    """Raised when the amount to convert is not strictly positive."""

    default_error_code = ErrorCode.INVALID_AMOUNT


class MissingCodeError(CurrencyConversionError):
    """Raised when a source or target currency code is empty."""

    default_error_code = ErrorCode.MISSING_CURRENCY_CODE


class ConfigurationError(CurrencyConversionError):
    """Raised when the rates API credential is not configured."""

    default_error_code = ErrorCode.CONFIGURATION_ERROR


class UnsupportedCurrencyError(CurrencyConversionError):
    """
    Raised when the rate table has no entry for a requested code.

    Attributes:
        currency_code: The upper-cased code that was not found.
    """

    default_error_code = ErrorCode.UNSUPPORTED_CURRENCY

    def __init__(self, message: str, currency_code: str, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.currency_code = currency_code


class UpstreamError(CurrencyConversionError):
    """
    Raised when the rates API fails for any reason not covered below.

    Attributes:
        status_code: HTTP status code from the rates API (if any).
    """

    default_error_code = ErrorCode.UPSTREAM_ERROR

    def __init__(
        self, message: str, status_code: Optional[int] = None, **kwargs: Any
    ) -> None:
        super().__init__(message, **kwargs)
        self.status_code = status_code


class AuthenticationError(UpstreamError):
    """Raised when the rates API rejects the configured credential (401)."""

    default_error_code = ErrorCode.AUTHENTICATION_ERROR


class RateLimitError(UpstreamError):
    """Raised when the rates API reports the rate limit is exceeded (429)."""

    default_error_code = ErrorCode.RATE_LIMIT_ERROR


# =============================================================================
# Model Gateway Errors
# =============================================================================


class ModelGatewayError(WizyBotException):
    """
    Raised when the language model call fails.

    Attributes:
        provider: Name of the model provider (e.g., "openai").
        status_code: HTTP status code from the provider API (if any).
    """

    default_error_code = ErrorCode.MODEL_GATEWAY_ERROR

    def __init__(
        self,
        message: str,
        provider: str = "openai",
        status_code: Optional[int] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.provider = provider
        self.status_code = status_code
