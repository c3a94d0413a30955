"""
Model Gateway Interface - the port the agent service talks to.

The gateway hides the language model behind two calls:
- ask_with_tool_calling: first pass, the model may request a tool
- complete_tool_result: second pass, the model answers using a tool result

Design Pattern:
- Ports and Adapters (Hexagonal Architecture)
- ModelGateway is the port; OpenAIModelGateway and FakeModelGateway are adapters
"""

from abc import ABC, abstractmethod

from wizybot.models.domain import ModelReply, ToolCallDirective


class ModelGateway(ABC):
    """
    Abstract base class for language model adapters.

    Methods:
        ask_with_tool_calling: Send the user query with the tools enabled
        complete_tool_result: Send the query, the tool call and its result
    """

    @abstractmethod
    async def ask_with_tool_calling(self, query: str) -> ModelReply:
        """
        Ask the model to answer the query, allowing it to request a tool.

        Args:
            query: The user's natural language query.

        Returns:
            ModelReply with text and zero or more tool call directives.

        Raises:
            ModelGatewayError: If the model call fails.
        """
        ...

    @abstractmethod
    async def complete_tool_result(
        self, query: str, directive: ToolCallDirective, result_payload: str
    ) -> ModelReply:
        """
        Ask the model for a final answer given a tool's result.

        Args:
            query: The user's original query.
            directive: The tool call that was executed.
            result_payload: The tool result, serialized as JSON.

        Returns:
            ModelReply whose text is the final answer.

        Raises:
            ModelGatewayError: If the model call fails.
        """
        ...
