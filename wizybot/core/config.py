"""
Core configuration module for WizyBot.

This module provides centralized configuration management using Pydantic Settings.
Configuration is loaded from environment variables with the WIZYBOT_ prefix.
The two provider credentials also accept their conventional unprefixed names
(OPENAI_API_KEY, OPEN_EXCHANGE_APP_ID) so existing .env files keep working.

The Settings object is built once at startup and handed to the components
that need it (currency converter, model gateway, catalog). Nothing below the
API layer reads the environment directly.
"""

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings


DEFAULT_EXCHANGE_RATES_URL = "https://openexchangerates.org/api/latest.json"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All fields use the WIZYBOT_ prefix for environment variables.
    Example: WIZYBOT_PORT=8080

    Secrets are SecretStr so they are masked in logs and repr; use
    .get_secret_value() to read them.
    """

    # =========================================================================
    # Service Configuration
    # =========================================================================
    service_name: str = Field(
        default="wizybot",
        description="Name of the service for logging and identification",
    )
    port: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="Port the service listens on",
    )
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Deployment environment",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level (DEBUG, INFO, WARNING, ERROR)",
    )
    cors_origins: str = Field(
        default="",
        description="Comma-separated CORS origins (ignored in development)",
    )

    # =========================================================================
    # Model Gateway (OpenAI)
    # =========================================================================
    openai_api_key: SecretStr = Field(
        default=SecretStr(""),
        validation_alias=AliasChoices("WIZYBOT_OPENAI_API_KEY", "OPENAI_API_KEY"),
        description="OpenAI API key for the chat completions model",
    )
    openai_model: str = Field(
        default="gpt-3.5-turbo",
        description="Chat model used for tool selection and final answers",
    )

    # =========================================================================
    # Currency Rates (Open Exchange Rates)
    # =========================================================================
    open_exchange_app_id: SecretStr = Field(
        default=SecretStr(""),
        validation_alias=AliasChoices(
            "WIZYBOT_OPEN_EXCHANGE_APP_ID", "OPEN_EXCHANGE_APP_ID"
        ),
        description="Open Exchange Rates app id (checked only when converting)",
    )
    exchange_rates_url: str = Field(
        default=DEFAULT_EXCHANGE_RATES_URL,
        description="Endpoint returning the latest rate table",
    )
    http_timeout_seconds: float = Field(
        default=10.0,
        ge=0.1,
        le=300.0,
        description="Timeout in seconds for outbound HTTP calls",
    )

    # =========================================================================
    # Product Catalog
    # =========================================================================
    catalog_path: str = Field(
        default="data/products_list.csv",
        description="Path to the product catalog CSV",
    )
    catalog_max_results: int = Field(
        default=2,
        ge=1,
        le=50,
        description="Maximum number of products returned by a search",
    )

    model_config = {
        "env_prefix": "WIZYBOT_",
        "env_file": ".env",
        "case_sensitive": False,
        "extra": "ignore",
        "populate_by_name": True,
    }

    # =========================================================================
    # Field Validators
    # =========================================================================
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the log level name."""
        level = v.upper()
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if level not in valid_levels:
            raise ValueError(f"Log level must be one of: {sorted(valid_levels)}")
        return level

    @field_validator("exchange_rates_url")
    @classmethod
    def validate_exchange_rates_url(cls, v: str) -> str:
        """Validate the rates endpoint URL scheme."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Exchange rates URL must start with http:// or https://")
        return v

    def get_cors_origins(self) -> list[str]:
        """
        Get CORS allowed origins based on environment.

        - Development: allow all origins (["*"])
        - Staging/Production: comma-separated cors_origins, empty if unset
        """
        if self.environment == "development":
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# =============================================================================
# Settings Singleton
# =============================================================================


@lru_cache
def get_settings() -> Settings:
    """
    Get the application settings singleton.

    Uses functools.lru_cache so only one Settings instance is created.
    Tests call get_settings.cache_clear() to pick up patched environments.

    Returns:
        Settings: The application settings instance.
    """
    return Settings()
