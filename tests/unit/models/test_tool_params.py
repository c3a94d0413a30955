"""
Tests for the searchProducts and convertCurrencies parameter models.
"""

import pytest
from pydantic import ValidationError

from wizybot.models.tools import ConversionParams, SearchParams


def messages(exc_info: pytest.ExceptionInfo[ValidationError]) -> list[str]:
    return [err["msg"] for err in exc_info.value.errors()]


class TestSearchParams:
    def test_valid_query(self) -> None:
        assert SearchParams.model_validate({"query": "phone"}).query == "phone"

    def test_query_is_not_trimmed(self) -> None:
        assert SearchParams.model_validate({"query": "  phone "}).query == "  phone "

    def test_missing_query(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            SearchParams.model_validate({})

        assert messages(exc_info) == ["Query must be a string, Query cannot be empty"]

    def test_empty_query(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            SearchParams.model_validate({"query": ""})

        assert messages(exc_info) == ["Query cannot be empty"]

    def test_non_string_query(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            SearchParams.model_validate({"query": 42})

        assert messages(exc_info) == ["Query must be a string"]

    def test_extra_fields_ignored(self) -> None:
        params = SearchParams.model_validate({"query": "phone", "limit": 10})

        assert not hasattr(params, "limit")


class TestConversionParamsAmount:
    @pytest.mark.parametrize("raw, expected", [(100, 100.0), (0.5, 0.5), ("150.50", 150.5)])
    def test_valid_amounts(self, raw: object, expected: float) -> None:
        params = ConversionParams.model_validate(
            {"amount": raw, "fromCurrency": "USD", "toCurrency": "EUR"}
        )

        assert params.amount == expected
        assert type(params.amount) is type(expected)

    @pytest.mark.parametrize("raw", [0, -5, "-1"])
    def test_non_positive_amounts(self, raw: object) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ConversionParams.model_validate(
                {"amount": raw, "fromCurrency": "USD", "toCurrency": "EUR"}
            )

        assert messages(exc_info) == ["Amount must be greater than 0"]

    @pytest.mark.parametrize("raw", ["abc", True, None, float("nan")])
    def test_non_numeric_amounts(self, raw: object) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ConversionParams.model_validate(
                {"amount": raw, "fromCurrency": "USD", "toCurrency": "EUR"}
            )

        assert messages(exc_info) == [
            "Amount must be a number, Amount must be greater than 0"
        ]


class TestConversionParamsCurrency:
    def test_snake_case_keys_are_not_accepted(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ConversionParams.model_validate(
                {"amount": 1, "from_currency": "GBP", "to_currency": "JPY"}
            )

        assert len(messages(exc_info)) == 2
        assert messages(exc_info)[0].startswith("Source currency must be a string")
        assert messages(exc_info)[1].startswith("Target currency must be a string")

    @pytest.mark.parametrize("code", ["usd", "US", "USDD", "U$D"])
    def test_malformed_codes_rejected(self, code: str) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ConversionParams.model_validate(
                {"amount": 1, "fromCurrency": code, "toCurrency": "EUR"}
            )

        assert messages(exc_info) == [
            "Source currency must be a 3-letter ISO code (e.g., USD, EUR)"
        ]

    def test_empty_target_code(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ConversionParams.model_validate(
                {"amount": 1, "fromCurrency": "USD", "toCurrency": ""}
            )

        assert messages(exc_info) == [
            "Target currency cannot be empty, "
            "Target currency must be a 3-letter ISO code (e.g., USD, EUR)"
        ]

    def test_all_fields_missing_reports_each_field(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ConversionParams.model_validate({})

        assert len(messages(exc_info)) == 3
        assert messages(exc_info)[1].startswith("Source currency must be a string")
        assert messages(exc_info)[2].startswith("Target currency must be a string")
