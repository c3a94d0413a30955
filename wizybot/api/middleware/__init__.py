"""
API Middleware Package.
"""

from wizybot.api.middleware.logging import (
    RequestLoggingMiddleware,
    redact_sensitive_headers,
)

__all__ = ["RequestLoggingMiddleware", "redact_sensitive_headers"]
