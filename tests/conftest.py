"""
Pytest configuration and shared fixtures.

This configuration sets up:
- Test markers for categorization
- Settings built without reading the environment or a .env file
- A small catalog CSV written to tmp_path
- Rate-source clients backed by httpx.MockTransport
"""

import json
from pathlib import Path
from typing import Any, Callable

import httpx
import pytest

from wizybot.core.config import Settings
from wizybot.observability.logging import reset_logging


# =============================================================================
# Test Markers
# =============================================================================


def pytest_configure(config):
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Tests that exercise the HTTP boundary")


@pytest.fixture(autouse=True)
def reset_logging_state():
    """Drop logging configuration a test (or app lifespan) installed."""
    yield
    reset_logging()


# =============================================================================
# Catalog Fixtures
# =============================================================================

CATALOG_HEADER = "displayTitle,embeddingText,price,url,imageUrl,productType\n"

CATALOG_ROWS = [
    'iPhone 12,"Apple smartphone with A14 chip. Color: Black",900.0 USD,'
    "https://shop.example/iphone-12,https://cdn.example/iphone-12.jpg,Technology\n",
    'iPhone 13,"Apple smartphone with A15 chip. Color: Blue",1099.0 USD,'
    "https://shop.example/iphone-13,https://cdn.example/iphone-13.jpg,Technology\n",
    'Samsung Galaxy S21,"Android phone with AMOLED display",799.0 USD,'
    "https://shop.example/galaxy-s21,https://cdn.example/galaxy-s21.jpg,Technology\n",
    'Wireless Headphones,"Bluetooth headphones with noise cancellation",199.99 USD,'
    "https://shop.example/headphones,https://cdn.example/headphones.jpg,Technology\n",
    'Ceramic Mug,"Dishwasher safe coffee mug",,,,\n',
]


@pytest.fixture
def sample_catalog_path(tmp_path: Path) -> Path:
    """Write a five-row catalog (four rows match "phone") and return its path."""
    path = tmp_path / "products_list.csv"
    path.write_text(CATALOG_HEADER + "".join(CATALOG_ROWS), encoding="utf-8")
    return path


# =============================================================================
# Settings Fixture
# =============================================================================


@pytest.fixture
def test_settings(sample_catalog_path: Path) -> Settings:
    """
    Settings with fake credentials and the sample catalog.

    _env_file=None keeps a developer's .env out of the tests.
    """
    return Settings(
        _env_file=None,
        environment="development",
        openai_api_key="test-openai-key",
        open_exchange_app_id="test-app-id",
        exchange_rates_url="https://rates.example/api/latest.json",
        catalog_path=str(sample_catalog_path),
        catalog_max_results=2,
    )


# =============================================================================
# Rate Source Fixtures
# =============================================================================

SAMPLE_RATES: dict[str, Any] = {
    "base": "USD",
    "rates": {"USD": 1.0, "EUR": 0.9, "GBP": 0.8, "JPY": 150.0, "XXX": 0},
}


def json_response(status_code: int, body: Any) -> httpx.Response:
    return httpx.Response(
        status_code,
        content=json.dumps(body).encode(),
        headers={"Content-Type": "application/json"},
    )


@pytest.fixture
def rates_client_factory() -> Callable[..., httpx.AsyncClient]:
    """
    Build an AsyncClient whose every request is answered by a MockTransport.

    Usage:
        client = rates_client_factory(200, SAMPLE_RATES)
        client = rates_client_factory(handler=my_handler)
    """

    def factory(
        status_code: int = 200,
        body: Any = None,
        handler: Callable[[httpx.Request], httpx.Response] | None = None,
    ) -> httpx.AsyncClient:
        if handler is None:
            payload = SAMPLE_RATES if body is None else body

            def handler(request: httpx.Request) -> httpx.Response:
                return json_response(status_code, payload)

        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return factory
