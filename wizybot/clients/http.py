"""
HTTP Client Module - client factory for outbound calls.

This module builds httpx.AsyncClient instances with connection limits and
timeouts. Nothing here retries: a failed call surfaces to the caller as-is.

Pattern: Factory pattern for creating configured HTTP clients
Anti-Pattern §1.1 Avoided: Uses Optional[T] with explicit None defaults
"""

from typing import Optional

import httpx

from wizybot import __version__


# =============================================================================
# Default Configuration Constants
# =============================================================================


DEFAULT_TIMEOUT_SECONDS: float = 10.0
"""Default timeout for HTTP requests in seconds."""

DEFAULT_MAX_CONNECTIONS: int = 20
"""Maximum number of connections in the pool."""

DEFAULT_MAX_KEEPALIVE: int = 5
"""Maximum number of keepalive connections."""


# =============================================================================
# HTTP Client Factory
# =============================================================================


def create_http_client(
    base_url: Optional[str] = None,
    timeout_seconds: Optional[float] = None,
    max_connections: Optional[int] = None,
    max_keepalive: Optional[int] = None,
    headers: Optional[dict[str, str]] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """
    Create a configured HTTP client with connection pooling and timeouts.

    Args:
        base_url: Base URL for all requests
        timeout_seconds: Request timeout in seconds (default: 10.0)
        max_connections: Maximum connections in pool (default: 20)
        max_keepalive: Maximum keepalive connections (default: 5)
        headers: Additional headers to include in all requests
        transport: Custom transport (tests pass httpx.MockTransport)

    Returns:
        httpx.AsyncClient: Configured async HTTP client

    Example:
        >>> async with create_http_client(timeout_seconds=5.0) as client:
        ...     response = await client.get("https://example.com/rates.json")
    """
    timeout = timeout_seconds if timeout_seconds is not None else DEFAULT_TIMEOUT_SECONDS
    max_conn = max_connections if max_connections is not None else DEFAULT_MAX_CONNECTIONS
    max_keep = max_keepalive if max_keepalive is not None else DEFAULT_MAX_KEEPALIVE

    default_headers = {
        "User-Agent": f"wizybot/{__version__}",
        "Accept": "application/json",
    }
    if headers:
        default_headers.update(headers)

    if transport is None:
        transport = httpx.AsyncHTTPTransport(
            limits=httpx.Limits(
                max_connections=max_conn,
                max_keepalive_connections=max_keep,
            ),
        )

    return httpx.AsyncClient(
        base_url=base_url or "",
        timeout=httpx.Timeout(timeout),
        headers=default_headers,
        transport=transport,
    )
