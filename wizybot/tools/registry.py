"""
Tool Registry - inventory of the tools the assistant may call.

Each entry pairs a ToolDefinition (advertised to the model) with the
parameter model its arguments are validated into and the async handler that
runs the capability.

Pattern: Service Registry (tool inventory with callable handlers)
"""

import logging
from collections.abc import Iterator

from wizybot.core.exceptions import ToolNotFoundError
from wizybot.models.domain import ProductRecord, ConversionOutcome, RegisteredTool, ToolDefinition
from wizybot.models.tools import ConversionParams, SearchParams
from wizybot.tools.builtin.catalog import SEARCH_PRODUCTS_DEFINITION, ProductCatalog
from wizybot.tools.builtin.currency import (
    CONVERT_CURRENCIES_DEFINITION,
    CurrencyConverter,
)

logger = logging.getLogger(__name__)


# =============================================================================
# ToolRegistry Class
# =============================================================================


class ToolRegistry:
    """
    Registry for managing available tools.

    Attributes:
        _tools: Dictionary mapping tool names to RegisteredTool instances.

    Example:
        >>> registry = ToolRegistry()
        >>> registry.register(search_tool)
        >>> registry.get("searchProducts").definition.name
        'searchProducts'
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._tools: dict[str, RegisteredTool] = {}

    def register(self, tool: RegisteredTool) -> None:
        """
        Register a tool under its definition's name.

        If a tool with the same name exists, it is overwritten.
        """
        self._tools[tool.name] = tool
        logger.debug(f"Registered tool: {tool.name}")

    def get(self, name: str) -> RegisteredTool:
        """
        Get a registered tool by name.

        Raises:
            ToolNotFoundError: If the tool is not registered.
        """
        if name not in self._tools:
            raise ToolNotFoundError(name)
        return self._tools[name]

    def has(self, name: str) -> bool:
        """Check if a tool is registered."""
        return name in self._tools

    def unregister(self, name: str) -> None:
        """Remove a tool from the registry. Missing names are ignored."""
        self._tools.pop(name, None)
        logger.debug(f"Unregistered tool: {name}")

    def list(self) -> list[ToolDefinition]:
        """
        List all registered tool definitions, in registration order.

        Suitable for passing to the model as the available tools.
        """
        return [tool.definition for tool in self._tools.values()]

    def __iter__(self) -> Iterator[RegisteredTool]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)


# =============================================================================
# Default registry
# =============================================================================


def create_default_registry(
    catalog: ProductCatalog, converter: CurrencyConverter
) -> ToolRegistry:
    """
    Build the registry holding searchProducts and convertCurrencies.

    Args:
        catalog: Catalog the searchProducts tool reads.
        converter: Converter the convertCurrencies tool calls.
    """

    async def search_products(params: SearchParams) -> list[ProductRecord]:
        return await catalog.search(params.query)

    async def convert_currencies(params: ConversionParams) -> ConversionOutcome:
        return await converter.convert(
            params.amount, params.from_currency, params.to_currency
        )

    registry = ToolRegistry()
    registry.register(
        RegisteredTool(
            definition=SEARCH_PRODUCTS_DEFINITION,
            params_model=SearchParams,
            handler=search_products,
        )
    )
    registry.register(
        RegisteredTool(
            definition=CONVERT_CURRENCIES_DEFINITION,
            params_model=ConversionParams,
            handler=convert_currencies,
        )
    )
    return registry
