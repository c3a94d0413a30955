"""
Tool Parameter Models - strict parameter shapes for the built-in tools.

These models are the validated form of a model's tool arguments. They are
only ever built by the argument validator (wizybot.tools.validation), which
feeds them the decoded arguments mapping.

Every field validator reports all of the constraints a value violates, as a
single comma-joined message, so the validator can present one entry per
field in its error.

Anti-Patterns Avoided:
- Lower-case or wrong-length currency codes are rejected, not normalized
- Unknown extra fields are ignored rather than rejected
"""

import math
import re
from typing import Any, Optional, Union

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

CURRENCY_CODE_PATTERN = re.compile(r"[A-Z]{3}")


def _reject(error_type: str, violations: list[str]) -> None:
    """Raise a single pydantic error listing every violated constraint."""
    if violations:
        raise PydanticCustomError(error_type, ", ".join(violations))


def _coerce_number(value: Any) -> Optional[Union[int, float]]:
    """
    Coerce a raw amount to a number.

    Integers are kept as given; floats and numeric strings become floats.
    Booleans, NaN and infinities are not numbers.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        number = value
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def _check_currency_code(value: Any, label: str) -> str:
    violations = []
    if not isinstance(value, str):
        violations.append(f"{label} currency must be a string")
    if value is None or value == "":
        violations.append(f"{label} currency cannot be empty")
    if not isinstance(value, str) or not CURRENCY_CODE_PATTERN.fullmatch(value):
        violations.append(
            f"{label} currency must be a 3-letter ISO code (e.g., USD, EUR)"
        )
    _reject("currency_code", violations)
    return value


# =============================================================================
# searchProducts parameters
# =============================================================================


class SearchParams(BaseModel):
    """Validated arguments for the searchProducts tool."""

    query: str = Field(
        default=None,
        validate_default=True,
        description="Free-text search terms",
    )

    model_config = {"frozen": True, "extra": "ignore"}

    @field_validator("query", mode="before")
    @classmethod
    def validate_query(cls, v: Any) -> str:
        """Query must be a non-empty string. It is not trimmed."""
        violations = []
        if not isinstance(v, str):
            violations.append("Query must be a string")
        if v is None or v == "":
            violations.append("Query cannot be empty")
        _reject("query", violations)
        return v


# =============================================================================
# convertCurrencies parameters
# =============================================================================


class ConversionParams(BaseModel):
    """Validated arguments for the convertCurrencies tool."""

    amount: Union[int, float] = Field(
        default=None,
        validate_default=True,
        description="Amount to convert, strictly positive",
    )
    from_currency: str = Field(
        default=None,
        alias="fromCurrency",
        validate_default=True,
        description="Source ISO 4217 code",
    )
    to_currency: str = Field(
        default=None,
        alias="toCurrency",
        validate_default=True,
        description="Target ISO 4217 code",
    )

    model_config = {"frozen": True, "extra": "ignore"}

    @field_validator("amount", mode="before")
    @classmethod
    def validate_amount(cls, v: Any) -> Union[int, float]:
        """Numeric strings are coerced; the amount must be greater than 0."""
        number = _coerce_number(v)
        violations = []
        if number is None:
            violations.append("Amount must be a number")
        if number is None or number <= 0:
            violations.append("Amount must be greater than 0")
        _reject("amount", violations)
        return number

    @field_validator("from_currency", mode="before")
    @classmethod
    def validate_from_currency(cls, v: Any) -> str:
        return _check_currency_code(v, "Source")

    @field_validator("to_currency", mode="before")
    @classmethod
    def validate_to_currency(cls, v: Any) -> str:
        return _check_currency_code(v, "Target")
