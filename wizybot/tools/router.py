"""
Tool Router - dispatches a tool call to its validated capability.

The router looks the tool up in the registry, validates the raw arguments
into the tool's parameter model, runs the handler and wraps the payload in a
ToolOutput.

An unknown tool name is not an error: dispatch() returns ToolUnavailable and
the caller decides how to end the turn. Validation and capability failures
propagate unchanged; nothing is retried.

Pattern: Command Executor (executes tool calls as commands)
Pattern: Dependency Injection (registry is injected)
"""

import logging
from typing import Any

from wizybot.models.domain import ToolOutcome, ToolOutput, ToolUnavailable
from wizybot.tools.registry import ToolRegistry
from wizybot.tools.validation import ArgumentValidator

logger = logging.getLogger(__name__)


class ToolRouter:
    """
    Router for running registered tools.

    Attributes:
        registry: The ToolRegistry to look up tools from.
        validator: Validator resolving raw arguments into parameter models.

    Example:
        >>> router = ToolRouter(registry=registry)
        >>> outcome = await router.dispatch("searchProducts", '{"query": "phone"}')
        >>> isinstance(outcome, ToolOutput)
        True
    """

    def __init__(self, registry: ToolRegistry) -> None:
        self.registry = registry
        self.validator = ArgumentValidator(registry)

    async def dispatch(self, tool_name: str, raw_args: Any) -> ToolOutcome:
        """
        Execute a tool call and return its outcome.

        Args:
            tool_name: Name of the requested tool.
            raw_args: Raw arguments (JSON text, mapping or RawArguments).

        Returns:
            ToolOutput with the capability payload, or ToolUnavailable when
            tool_name is not registered.

        Raises:
            MalformedArgumentsError: If the arguments are not a JSON object.
            ToolValidationError: If the arguments break the tool's contract.
            WizyBotException: Any capability failure, unchanged.
        """
        if not self.registry.has(tool_name):
            logger.warning(f"Requested tool is not available: {tool_name!r}")
            return ToolUnavailable(name=tool_name)

        tool = self.registry.get(tool_name)
        params = self.validator.validate(tool_name, raw_args)

        logger.info(f"Executing tool {tool_name}")
        payload = await tool.handler(params)
        return ToolOutput(name=tool_name, payload=payload)
