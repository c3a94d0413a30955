"""
Tests for argument parsing and validation.

Test Categories:
1. TestParseToolArguments - JSON text vs mapping, malformed payloads
2. TestValidateArguments - aggregated violation messages
3. TestArgumentValidator - registry lookups
"""

import pytest

from wizybot.core.exceptions import (
    MalformedArgumentsError,
    ToolNotFoundError,
    ToolValidationError,
)
from wizybot.models.domain import JsonTextArguments, StructuredArguments
from wizybot.models.tools import ConversionParams, SearchParams
from wizybot.tools.builtin.catalog import ProductCatalog
from wizybot.tools.builtin.currency import CurrencyConverter
from wizybot.tools.registry import create_default_registry
from wizybot.tools.validation import (
    ArgumentValidator,
    parse_tool_arguments,
    validate_arguments,
)


class TestParseToolArguments:
    def test_json_text_is_decoded(self) -> None:
        arguments = parse_tool_arguments(JsonTextArguments(text='{"query": "phone"}'))

        assert arguments == StructuredArguments(values={"query": "phone"})

    def test_plain_string_is_decoded(self) -> None:
        assert parse_tool_arguments('{"amount": 5}').values == {"amount": 5}

    def test_mapping_passes_through(self) -> None:
        arguments = StructuredArguments(values={"query": "phone"})

        assert parse_tool_arguments(arguments) is arguments

    @pytest.mark.parametrize("text", ["{not json", "", '{"query": '])
    def test_invalid_json_is_malformed(self, text: str) -> None:
        with pytest.raises(MalformedArgumentsError) as exc_info:
            parse_tool_arguments(text)

        assert exc_info.value.message == "Malformed tool arguments from AI response."
        assert exc_info.value.raw_arguments == text

    @pytest.mark.parametrize("text", ["[1, 2]", '"phone"', "42", "null"])
    def test_non_object_json_is_malformed(self, text: str) -> None:
        with pytest.raises(MalformedArgumentsError):
            parse_tool_arguments(text)

    def test_unsupported_type_is_malformed(self) -> None:
        with pytest.raises(MalformedArgumentsError):
            parse_tool_arguments(3.14)


class TestValidateArguments:
    def test_valid_arguments(self) -> None:
        params = validate_arguments("searchProducts", SearchParams, '{"query": "phone"}')

        assert params == SearchParams(query="phone")

    def test_single_violation_message(self) -> None:
        with pytest.raises(ToolValidationError) as exc_info:
            validate_arguments("searchProducts", SearchParams, {"query": ""})

        assert exc_info.value.message == (
            "Tool parameter validation failed: Query cannot be empty"
        )
        assert exc_info.value.tool_name == "searchProducts"

    def test_violations_joined_per_field(self) -> None:
        with pytest.raises(ToolValidationError) as exc_info:
            validate_arguments(
                "convertCurrencies",
                ConversionParams,
                {"amount": 0, "fromCurrency": "usd", "toCurrency": "EUR"},
            )

        assert exc_info.value.message == (
            "Tool parameter validation failed: Amount must be greater than 0; "
            "Source currency must be a 3-letter ISO code (e.g., USD, EUR)"
        )
        assert len(exc_info.value.violations) == 2

    def test_malformed_json_is_not_a_validation_error(self) -> None:
        with pytest.raises(MalformedArgumentsError):
            validate_arguments("searchProducts", SearchParams, "{oops")


class TestArgumentValidator:
    @pytest.fixture
    def validator(self, sample_catalog_path) -> ArgumentValidator:
        registry = create_default_registry(
            ProductCatalog(sample_catalog_path), CurrencyConverter(app_id="x")
        )
        return ArgumentValidator(registry)

    def test_uses_registered_params_model(self, validator: ArgumentValidator) -> None:
        params = validator.validate(
            "convertCurrencies",
            '{"amount": "150.50", "fromCurrency": "USD", "toCurrency": "EUR"}',
        )

        assert isinstance(params, ConversionParams)
        assert params.amount == 150.5

    def test_unknown_tool(self, validator: ArgumentValidator) -> None:
        with pytest.raises(ToolNotFoundError):
            validator.validate("getWeather", {})
