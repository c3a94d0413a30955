"""
Request Logging Middleware - per-request correlation IDs and access logs.

Every request gets a correlation id, taken from the X-Request-ID header or
generated. It is bound for the duration of the request, so every log line
emitted while handling it carries the id, and it is echoed back in the
response header.
"""

import logging
import time
import uuid
from typing import Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from wizybot.observability.logging import correlation_id_context

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

# Case-insensitive substrings of header names that are never logged
SENSITIVE_HEADER_PATTERNS = [
    "authorization",
    "api-key",
    "apikey",
    "api_key",
    "app_id",
    "x-auth-token",
    "cookie",
]


def redact_sensitive_headers(headers: dict[str, str]) -> dict[str, str]:
    """
    Replace the values of credential-bearing headers with [REDACTED].

    Args:
        headers: Dictionary of HTTP headers.

    Returns:
        A new dictionary safe to log.
    """
    return {
        key: (
            "[REDACTED]"
            if any(pattern in key.lower() for pattern in SENSITIVE_HEADER_PATTERNS)
            else value
        )
        for key, value in headers.items()
    }


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs method, path, status and duration of each request.

    Requests answered with a 4xx/5xx status are logged at WARNING.
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        correlation_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        start_time = time.perf_counter()
        method = request.method
        path = request.url.path

        with correlation_id_context(correlation_id):
            logger.debug(
                f"Request: {method} {path} "
                f"headers={redact_sensitive_headers(dict(request.headers))}"
            )

            try:
                response = await call_next(request)
            except Exception as e:
                duration_ms = (time.perf_counter() - start_time) * 1000
                logger.error(
                    f"Request failed: {method} {path} "
                    f"error={type(e).__name__}: {e} duration={duration_ms:.2f}ms"
                )
                raise

            duration_ms = (time.perf_counter() - start_time) * 1000
            log_level = logging.WARNING if response.status_code >= 400 else logging.INFO
            logger.log(
                log_level,
                f"{method} {path} {response.status_code} duration={duration_ms:.2f}ms",
            )

        response.headers[REQUEST_ID_HEADER] = correlation_id
        return response
