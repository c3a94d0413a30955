"""Clients Package - outbound HTTP client construction."""

from wizybot.clients.http import create_http_client

__all__ = ["create_http_client"]
