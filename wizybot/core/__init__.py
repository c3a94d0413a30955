"""
Core module for WizyBot.

This module contains configuration, exceptions, and shared utilities.
"""

from wizybot.core.config import Settings, get_settings
from wizybot.core.exceptions import (
    AuthenticationError,
    CatalogReadError,
    ConfigurationError,
    CurrencyConversionError,
    ErrorCode,
    InvalidAmountError,
    MalformedArgumentsError,
    MissingCodeError,
    ModelGatewayError,
    RateLimitError,
    ToolNotFoundError,
    ToolValidationError,
    UnsupportedCurrencyError,
    UpstreamError,
    WizyBotException,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Exceptions
    "ErrorCode",
    "WizyBotException",
    "MalformedArgumentsError",
    "ToolValidationError",
    "ToolNotFoundError",
    "CatalogReadError",
    "CurrencyConversionError",
    "InvalidAmountError",
    "MissingCodeError",
    "ConfigurationError",
    "UnsupportedCurrencyError",
    "UpstreamError",
    "AuthenticationError",
    "RateLimitError",
    "ModelGatewayError",
]
