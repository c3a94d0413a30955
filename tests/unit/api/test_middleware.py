"""
Tests for RequestLoggingMiddleware and header redaction.
"""

import logging

from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient

from wizybot.api.middleware.logging import (
    REQUEST_ID_HEADER,
    RequestLoggingMiddleware,
    redact_sensitive_headers,
)
from wizybot.observability.logging import get_correlation_id


def make_app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(RequestLoggingMiddleware)

    @app.get("/whoami")
    async def whoami() -> dict:
        return {"correlation_id": get_correlation_id()}

    @app.get("/missing-thing")
    async def missing() -> dict:
        raise HTTPException(status_code=404)

    return app


class TestRedactSensitiveHeaders:
    def test_credentials_are_redacted(self) -> None:
        redacted = redact_sensitive_headers(
            {
                "Authorization": "Bearer sk-secret",
                "X-API-Key": "abc",
                "Cookie": "session=1",
                "Content-Type": "application/json",
            }
        )

        assert redacted == {
            "Authorization": "[REDACTED]",
            "X-API-Key": "[REDACTED]",
            "Cookie": "[REDACTED]",
            "Content-Type": "application/json",
        }


class TestRequestLoggingMiddleware:
    def test_incoming_request_id_is_bound_and_echoed(self) -> None:
        client = TestClient(make_app())

        response = client.get("/whoami", headers={REQUEST_ID_HEADER: "req-1"})

        assert response.json() == {"correlation_id": "req-1"}
        assert response.headers[REQUEST_ID_HEADER] == "req-1"

    def test_request_id_is_generated(self) -> None:
        client = TestClient(make_app())

        response = client.get("/whoami")

        generated = response.headers[REQUEST_ID_HEADER]
        assert generated
        assert response.json() == {"correlation_id": generated}

    def test_error_responses_logged_as_warning(self, caplog) -> None:
        client = TestClient(make_app())

        with caplog.at_level(logging.INFO, logger="wizybot.api.middleware.logging"):
            client.get("/missing-thing")

        records = [r for r in caplog.records if "/missing-thing 404" in r.getMessage()]
        assert records[0].levelno == logging.WARNING
