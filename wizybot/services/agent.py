"""
Agent Service - single-turn tool-calling orchestration.

This module runs one user turn end to end:

    Start -> AwaitingModelDecision -> DirectAnswer -> Done
                                   -> ToolRequested -> AwaitingToolResult
                                      -> AwaitingFinalAnswer -> Done

At most two model calls and one tool call happen per turn. When the model
requests several tools, only the first is honored and the rest are dropped.

Pattern: Service Layer (orchestrates domain operations)
Pattern: Dependency Injection (gateway and router are injected)
"""

import logging

from wizybot.models.domain import ToolCallDirective, ToolUnavailable
from wizybot.providers.base import ModelGateway
from wizybot.tools.router import ToolRouter
from wizybot.tools.validation import parse_tool_arguments

logger = logging.getLogger(__name__)

NO_RESPONSE_TEXT = "Unable to generate a response."
EMPTY_FOLLOW_UP_TEXT = "Response generated without content."


class AgentService:
    """
    Service layer for a single assistant turn.

    Attributes:
        _gateway: Model gateway used for both model calls.
        _router: Tool router that executes the requested tool.

    Example:
        >>> service = AgentService(gateway=gateway, router=router)
        >>> await service.handle_query("I am looking for a phone")
        'Here are two phones you might like: ...'
    """

    def __init__(self, gateway: ModelGateway, router: ToolRouter) -> None:
        self._gateway = gateway
        self._router = router

    async def handle_query(self, query: str) -> str:
        """
        Answer a user query, calling at most one tool.

        Args:
            query: The user's natural language query.

        Returns:
            The assistant's final text.

        Raises:
            ModelGatewayError: If a model call fails.
            MalformedArgumentsError: If the tool arguments are not a JSON object.
            ToolValidationError: If the tool arguments break the tool's contract.
            WizyBotException: Any capability failure, unchanged.
        """
        reply = await self._gateway.ask_with_tool_calling(query)

        directive = reply.first_tool_call
        if directive is None or not directive.name:
            logger.debug("Model answered directly")
            return reply.text or NO_RESPONSE_TEXT

        if len(reply.tool_calls) > 1:
            dropped = [call.name for call in reply.tool_calls[1:]]
            logger.info(
                f"Model requested {len(reply.tool_calls)} tools; "
                f"honoring {directive.name}, dropping {dropped}"
            )

        return await self._run_tool(query, directive)

    async def _run_tool(self, query: str, directive: ToolCallDirective) -> str:
        """Execute the requested tool and ask the model for the final answer."""
        logger.info(f"Model requested tool {directive.name}")
        arguments = parse_tool_arguments(directive.arguments)

        outcome = await self._router.dispatch(directive.name, arguments)
        if isinstance(outcome, ToolUnavailable):
            return outcome.message

        logger.debug(f"Tool {directive.name} finished; requesting final answer")
        final = await self._gateway.complete_tool_result(
            query, directive, outcome.payload_json()
        )
        return final.text if final.text is not None else EMPTY_FOLLOW_UP_TEXT
