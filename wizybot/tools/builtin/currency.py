"""
Currency Conversion Tool - convertCurrencies.

This module converts an amount between two currencies using the latest rate
table from Open Exchange Rates.

The rate table is keyed by currency code relative to one base currency. The
conversion uses the cross rate rates[to] / rates[from], so it is correct for
whatever base the table uses. The converted amount and the rate are rounded
independently (2 and 6 decimal places) so rounding never compounds.

Every conversion fetches a fresh table. There is no caching and no retry.

Pattern: Service Proxy (wraps an external HTTP API behind a typed call)
Pattern: Dependency Injection (credential, endpoint and HTTP client)
"""

import logging
from typing import Any, Optional, Union

import httpx
from pydantic import SecretStr

from wizybot.clients.http import create_http_client
from wizybot.core.config import DEFAULT_EXCHANGE_RATES_URL, Settings
from wizybot.core.exceptions import (
    AuthenticationError,
    ConfigurationError,
    InvalidAmountError,
    MissingCodeError,
    RateLimitError,
    UnsupportedCurrencyError,
    UpstreamError,
)
from wizybot.models.domain import ConversionOutcome, ToolDefinition

logger = logging.getLogger(__name__)


# =============================================================================
# Tool Definition
# =============================================================================


CONVERT_CURRENCIES_DEFINITION = ToolDefinition(
    name="convertCurrencies",
    description="Converts a monetary amount from one currency to another using current "
    "exchange rates. Supports all major world currencies using ISO 4217 codes.",
    parameters={
        "type": "object",
        "properties": {
            "amount": {
                "type": "number",
                "description": "Numeric amount to convert (e.g., 100, 250.50)",
            },
            "fromCurrency": {
                "type": "string",
                "description": "Source currency as 3-letter ISO code "
                "(USD, EUR, GBP, JPY, CAD, AUD, etc.)",
            },
            "toCurrency": {
                "type": "string",
                "description": "Target currency as 3-letter ISO code "
                "(USD, EUR, GBP, JPY, CAD, AUD, etc.)",
            },
        },
        "required": ["amount", "fromCurrency", "toCurrency"],
        "additionalProperties": False,
    },
)


# =============================================================================
# CurrencyConverter
# =============================================================================


class CurrencyConverter:
    """
    Converts amounts between currencies using live exchange rates.

    The app id is only checked when a conversion is attempted, so the service
    starts (and product search works) without it.

    Attributes:
        rates_url: Endpoint returning {"base": ..., "rates": {...}}.
        timeout_seconds: Timeout for the rates request.

    Example:
        >>> converter = CurrencyConverter.from_settings(get_settings())
        >>> outcome = await converter.convert(100, "USD", "EUR")
        >>> outcome.result
        92.31
    """

    def __init__(
        self,
        app_id: Union[SecretStr, str, None] = None,
        rates_url: str = DEFAULT_EXCHANGE_RATES_URL,
        timeout_seconds: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Initialize the converter.

        Args:
            app_id: Open Exchange Rates app id.
            rates_url: Rates endpoint URL.
            timeout_seconds: Request timeout (factory default if None).
            http_client: Optional pre-configured client (for testing). It is
                not closed by the converter.
        """
        if isinstance(app_id, str):
            app_id = SecretStr(app_id)
        self._app_id = app_id
        self.rates_url = rates_url
        self.timeout_seconds = timeout_seconds
        self._http_client = http_client

    @classmethod
    def from_settings(
        cls, settings: Settings, http_client: Optional[httpx.AsyncClient] = None
    ) -> "CurrencyConverter":
        """Build a converter from application settings."""
        return cls(
            app_id=settings.open_exchange_app_id,
            rates_url=settings.exchange_rates_url,
            timeout_seconds=settings.http_timeout_seconds,
            http_client=http_client,
        )

    async def convert(
        self, amount: float, from_currency: str, to_currency: str
    ) -> ConversionOutcome:
        """
        Convert an amount from one currency to another.

        Args:
            amount: Amount to convert, strictly positive.
            from_currency: Source ISO 4217 code.
            to_currency: Target ISO 4217 code.

        Returns:
            ConversionOutcome with upper-cased codes, the rounded result and
            the rounded rate.

        Raises:
            InvalidAmountError: If amount <= 0.
            MissingCodeError: If either code is empty.
            ConfigurationError: If no app id is configured.
            AuthenticationError: If the rates API answers 401.
            RateLimitError: If the rates API answers 429.
            UpstreamError: On any other rates API failure.
            UnsupportedCurrencyError: If a code is missing from the table.
        """
        self._validate_inputs(amount, from_currency, to_currency)
        app_id = self._require_app_id()

        rates = await self._fetch_rates(app_id)

        source_code = from_currency.upper()
        target_code = to_currency.upper()
        source_rate = _lookup_rate(rates, source_code)
        target_rate = _lookup_rate(rates, target_code)

        if not source_rate or not target_rate:
            invalid_code = source_code if not source_rate else target_code
            raise UnsupportedCurrencyError(
                f'Currency code "{invalid_code}" is not supported. '
                "Use valid ISO 4217 codes (USD, EUR, GBP, JPY, etc.)",
                currency_code=invalid_code,
            )

        conversion_rate = target_rate / source_rate
        converted_amount = amount * conversion_rate

        logger.debug(
            f"Converted {amount} {source_code} to {target_code} at rate {conversion_rate}"
        )
        return ConversionOutcome(
            amount=amount,
            from_currency=source_code,
            to_currency=target_code,
            result=round(converted_amount, 2),
            rate=round(conversion_rate, 6),
        )

    # =========================================================================
    # Input and configuration checks
    # =========================================================================

    @staticmethod
    def _validate_inputs(amount: float, from_currency: str, to_currency: str) -> None:
        if amount <= 0:
            raise InvalidAmountError("Amount must be greater than zero")
        if not from_currency or not to_currency:
            raise MissingCodeError("Both source and target currency codes are required")

    def _require_app_id(self) -> str:
        app_id = self._app_id.get_secret_value() if self._app_id else ""
        if not app_id:
            raise ConfigurationError(
                "Missing OPEN_EXCHANGE_APP_ID in environment variables. "
                "Obtain a free API key at https://openexchangerates.org/signup/free"
            )
        return app_id

    # =========================================================================
    # Rates API
    # =========================================================================

    async def _fetch_rates(self, app_id: str) -> dict[str, Any]:
        """
        Fetch the latest rate table.

        Raises:
            AuthenticationError, RateLimitError, UpstreamError
        """
        try:
            if self._http_client is not None:
                response = await self._http_client.get(
                    self.rates_url, params={"app_id": app_id}
                )
                response.raise_for_status()
            else:
                async with create_http_client(
                    timeout_seconds=self.timeout_seconds
                ) as client:
                    response = await client.get(self.rates_url, params={"app_id": app_id})
                    response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise _classify_status_error(e.response) from e
        except httpx.HTTPError as e:
            logger.error(f"Exchange rates request failed: {type(e).__name__}: {e}")
            raise UpstreamError(
                f"Exchange rates API error: {str(e) or 'Unknown issue'}"
            ) from e

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamError("Exchange rates API error: response is not JSON") from e

        rates = data.get("rates") if isinstance(data, dict) else None
        if not isinstance(rates, dict):
            raise UpstreamError("Exchange rates API error: response has no rates table")
        return rates


def _lookup_rate(rates: dict[str, Any], code: str) -> Optional[float]:
    rate = rates.get(code)
    if isinstance(rate, bool) or not isinstance(rate, (int, float)):
        return None
    return float(rate)


def _classify_status_error(response: httpx.Response) -> UpstreamError:
    """Map a non-2xx rates API response to the matching error type."""
    status_code = response.status_code

    if status_code == 401:
        logger.error("Exchange rates API rejected the configured app id")
        return AuthenticationError(
            "Authentication failed: Invalid API key for Open Exchange Rates",
            status_code=status_code,
        )

    if status_code == 429:
        logger.warning("Exchange rates API rate limit exceeded")
        return RateLimitError(
            "Rate limit exceeded. Wait before retrying or upgrade your API plan",
            status_code=status_code,
        )

    details = _error_details(response) or response.reason_phrase or "Unknown issue"
    logger.error(f"Exchange rates API returned {status_code}: {details}")
    return UpstreamError(f"Exchange rates API error: {details}", status_code=status_code)


def _error_details(response: httpx.Response) -> Optional[str]:
    """Extract the upstream's message text, if the body carries one."""
    try:
        body = response.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    details = body.get("message") or body.get("description")
    return str(details) if details else None
