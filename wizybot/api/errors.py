"""
Error Translation - WizyBotException to HTTP responses.

Every WizyBotException that escapes a route is rendered as

    {"error": {"code": "<ERROR_CODE>", "message": "..."}}

with a status chosen by exception type:

- caller/input problems (bad tool arguments, bad amount or currency): 400
- upstream rate limiting: 429
- upstream or model failures (including unparseable model output): 502
- server-side problems (configuration, catalog file): 500
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from wizybot.core.exceptions import (
    AuthenticationError,
    CatalogReadError,
    ConfigurationError,
    InvalidAmountError,
    MalformedArgumentsError,
    MissingCodeError,
    ModelGatewayError,
    RateLimitError,
    ToolValidationError,
    UnsupportedCurrencyError,
    UpstreamError,
    WizyBotException,
)
from wizybot.models.responses import ErrorDetail, ErrorResponse

logger = logging.getLogger(__name__)

# Checked in order; subclasses must precede their bases
STATUS_BY_EXCEPTION: list[tuple[type[WizyBotException], int]] = [
    (ToolValidationError, 400),
    (InvalidAmountError, 400),
    (MissingCodeError, 400),
    (UnsupportedCurrencyError, 400),
    (RateLimitError, 429),
    (AuthenticationError, 502),
    (UpstreamError, 502),
    (MalformedArgumentsError, 502),
    (ModelGatewayError, 502),
    (ConfigurationError, 500),
    (CatalogReadError, 500),
]


def status_for_exception(exc: WizyBotException) -> int:
    """HTTP status for a WizyBotException (500 when unmapped)."""
    for exc_type, status_code in STATUS_BY_EXCEPTION:
        if isinstance(exc, exc_type):
            return status_code
    return 500


async def wizybot_exception_handler(
    request: Request, exc: WizyBotException
) -> JSONResponse:
    status_code = status_for_exception(exc)
    log_level = logging.ERROR if status_code >= 500 else logging.WARNING
    logger.log(
        log_level,
        f"{request.method} {request.url.path} failed: "
        f"{type(exc).__name__} code={exc.error_code} message={exc.message}",
    )

    body = ErrorResponse(
        error=ErrorDetail(
            code=str(getattr(exc.error_code, "value", exc.error_code)),
            message=exc.message,
            tool_name=getattr(exc, "tool_name", None),
        )
    )
    return JSONResponse(
        status_code=status_code, content=body.model_dump(exclude_none=True)
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the WizyBotException handler on an application."""
    app.add_exception_handler(WizyBotException, wizybot_exception_handler)
