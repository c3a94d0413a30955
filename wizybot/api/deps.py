"""
API Dependencies - FastAPI dependency injection functions.

All dependencies are factory functions that tests can replace through
FastAPI's dependency_overrides mechanism.

Pattern: Composition root (wiring happens here, nowhere else)
"""

import logging
from functools import lru_cache
from typing import Optional

import httpx

from wizybot.core.config import Settings, get_settings as _get_settings
from wizybot.providers.base import ModelGateway
from wizybot.providers.openai import OpenAIModelGateway
from wizybot.services.agent import AgentService
from wizybot.tools.builtin.catalog import ProductCatalog
from wizybot.tools.builtin.currency import CurrencyConverter
from wizybot.tools.registry import create_default_registry
from wizybot.tools.router import ToolRouter

logger = logging.getLogger(__name__)


def get_settings() -> Settings:
    """Application settings (singleton from core.config)."""
    return _get_settings()


def build_agent_service(
    settings: Settings,
    gateway: Optional[ModelGateway] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> AgentService:
    """
    Wire the agent service from settings.

    Args:
        settings: Application settings holding credentials and paths.
        gateway: Model gateway override; OpenAI is used when omitted.
        http_client: Client for the rate source (tests pass a MockTransport).

    Returns:
        AgentService with both tools registered.
    """
    registry = create_default_registry(
        catalog=ProductCatalog.from_settings(settings),
        converter=CurrencyConverter.from_settings(settings, http_client=http_client),
    )
    if gateway is None:
        gateway = OpenAIModelGateway.from_settings(settings, tools=registry.list())

    logger.debug(f"Agent service built with tools: {[t.name for t in registry.list()]}")
    return AgentService(gateway=gateway, router=ToolRouter(registry))


@lru_cache
def get_agent_service() -> AgentService:
    """
    Get the AgentService singleton.

    Pattern: Factory function for DI, cached like get_settings()
    """
    return build_agent_service(get_settings())
