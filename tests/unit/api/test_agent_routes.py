"""
Tests for POST /agent and error translation at the HTTP boundary.

The agent service dependency is overridden with one wired to a
FakeModelGateway, the sample catalog and a MockTransport rate source.
"""

from typing import Callable, Iterator

import pytest
from fastapi.testclient import TestClient

from wizybot.api.deps import build_agent_service, get_agent_service
from wizybot.core.config import Settings
from wizybot.core.exceptions import ModelGatewayError
from wizybot.main import create_app
from wizybot.models.domain import ModelReply, ToolCallDirective
from wizybot.providers.fake import FakeModelGateway

pytestmark = pytest.mark.integration

CONVERT_100_USD_EUR = {"amount": 100, "fromCurrency": "USD", "toCurrency": "EUR"}


@pytest.fixture
def make_client(
    test_settings: Settings, rates_client_factory
) -> Iterator[Callable[..., TestClient]]:
    """
    Build a TestClient whose agent uses the given gateway and rate response.

    Usage:
        client = make_client(gateway, rates_status=429)
    """
    clients: list[TestClient] = []

    def factory(
        gateway: FakeModelGateway,
        settings: Settings = test_settings,
        rates_status: int = 200,
        rates_body: object = None,
    ) -> TestClient:
        app = create_app(settings)
        service = build_agent_service(
            settings,
            gateway=gateway,
            http_client=rates_client_factory(rates_status, rates_body),
        )
        app.dependency_overrides[get_agent_service] = lambda: service
        client = TestClient(app)
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.close()


def tool_reply(name: str, arguments: object) -> ModelReply:
    return ModelReply(tool_calls=[ToolCallDirective(id="call_1", name=name, arguments=arguments)])


class TestAgentEndpoint:
    def test_direct_answer(self, make_client) -> None:
        client = make_client(FakeModelGateway(first_reply=ModelReply(text="Hi there!")))

        response = client.post("/agent", json={"query": "Hello"})

        assert response.status_code == 200
        assert response.json() == {"response": "Hi there!"}

    def test_tool_turn(self, make_client) -> None:
        gateway = FakeModelGateway(
            first_reply=tool_reply("searchProducts", {"query": "phone"}),
            follow_up_reply=ModelReply(text="Here are two phones."),
        )
        client = make_client(gateway)

        response = client.post("/agent", json={"query": "I am looking for a phone"})

        assert response.json() == {"response": "Here are two phones."}
        assert len(gateway.follow_up_calls) == 1

    def test_unknown_tool_is_a_normal_answer(self, make_client) -> None:
        client = make_client(FakeModelGateway(first_reply=tool_reply("getWeather", {})))

        response = client.post("/agent", json={"query": "weather"})

        assert response.status_code == 200
        assert response.json() == {"response": 'Tool "getWeather" is not available.'}

    @pytest.mark.parametrize("body", [{"query": ""}, {}, {"query": 42}])
    def test_invalid_request_body(self, make_client, body: dict) -> None:
        gateway = FakeModelGateway()
        client = make_client(gateway)

        response = client.post("/agent", json=body)

        assert response.status_code == 422
        assert gateway.ask_calls == []

    def test_request_id_is_echoed(self, make_client) -> None:
        client = make_client(FakeModelGateway())

        response = client.post("/agent", json={"query": "hi"}, headers={"X-Request-ID": "req-42"})

        assert response.headers["X-Request-ID"] == "req-42"


class TestAgentErrors:
    def test_validation_error_is_400(self, make_client) -> None:
        client = make_client(
            FakeModelGateway(first_reply=tool_reply("searchProducts", {"query": ""}))
        )

        response = client.post("/agent", json={"query": "find"})

        assert response.status_code == 400
        assert response.json()["error"] == {
            "code": "VALIDATION_ERROR",
            "message": "Tool parameter validation failed: Query cannot be empty",
            "tool_name": "searchProducts",
        }

    def test_malformed_arguments_is_502(self, make_client) -> None:
        client = make_client(
            FakeModelGateway(first_reply=tool_reply("searchProducts", "{oops"))
        )

        response = client.post("/agent", json={"query": "find"})

        assert response.status_code == 502
        assert response.json()["error"]["code"] == "MALFORMED_ARGUMENTS"

    def test_unsupported_currency_is_400(self, make_client) -> None:
        client = make_client(
            FakeModelGateway(first_reply=tool_reply("convertCurrencies", CONVERT_100_USD_EUR)),
            rates_body={"base": "USD", "rates": {"USD": 1.0}},
        )

        response = client.post("/agent", json={"query": "convert"})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "UNSUPPORTED_CURRENCY"

    def test_rate_limit_is_429(self, make_client) -> None:
        client = make_client(
            FakeModelGateway(first_reply=tool_reply("convertCurrencies", CONVERT_100_USD_EUR)),
            rates_status=429,
            rates_body={},
        )

        response = client.post("/agent", json={"query": "convert"})

        assert response.status_code == 429
        assert response.json()["error"]["code"] == "RATE_LIMIT_ERROR"

    def test_authentication_error_is_502(self, make_client) -> None:
        client = make_client(
            FakeModelGateway(first_reply=tool_reply("convertCurrencies", CONVERT_100_USD_EUR)),
            rates_status=401,
            rates_body={},
        )

        response = client.post("/agent", json={"query": "convert"})

        assert response.status_code == 502
        assert response.json()["error"]["code"] == "AUTHENTICATION_ERROR"

    def test_missing_app_id_is_500(self, make_client, test_settings: Settings) -> None:
        settings = test_settings.model_copy(update={"open_exchange_app_id": None})
        client = make_client(
            FakeModelGateway(first_reply=tool_reply("convertCurrencies", CONVERT_100_USD_EUR)),
            settings=settings,
        )

        response = client.post("/agent", json={"query": "convert"})

        assert response.status_code == 500
        assert response.json()["error"]["code"] == "CONFIGURATION_ERROR"

    def test_gateway_error_is_502(self, make_client) -> None:
        client = make_client(
            FakeModelGateway(error_on_ask=ModelGatewayError("Model request failed: down"))
        )

        response = client.post("/agent", json={"query": "hi"})

        assert response.status_code == 502
        assert response.json() == {
            "error": {
                "code": "MODEL_GATEWAY_ERROR",
                "message": "Model request failed: down",
            }
        }
