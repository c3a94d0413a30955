"""
OpenAI Model Gateway - Chat Completions adapter.

This module implements the ModelGateway port on top of the OpenAI Chat
Completions API with function calling.

The first pass sends the system prompt, the user query and the tool
definitions (tool_choice="auto"). The second pass replays the assistant's
tool call and the tool's JSON result so the model can phrase the answer.

Design Patterns:
- Ports and Adapters: OpenAIModelGateway implements ModelGateway
- Adapter Pattern: Transforms OpenAI SDK responses to ModelReply
"""

import logging
from typing import Any, Optional, Sequence, Union

import openai
from openai import AsyncOpenAI
from pydantic import SecretStr

from wizybot.core.config import Settings
from wizybot.core.exceptions import ModelGatewayError
from wizybot.models.domain import ModelReply, ToolCallDirective, ToolDefinition
from wizybot.providers.base import ModelGateway

logger = logging.getLogger(__name__)

PROVIDER_NAME = "openai"

ASSISTANT_SYSTEM_PROMPT = (
    "You are WizyBot, an intelligent shopping assistant specialized in helping users "
    "find products and convert currencies.\n\n"
    "Available capabilities:\n"
    "• Product Search: Find items from the catalog based on user preferences\n"
    "• Currency Conversion: Convert monetary amounts between different currencies\n\n"
    "Guidelines:\n"
    "- Always be helpful, friendly, and concise\n"
    "- Use searchProducts when users ask about items, gifts, or shopping\n"
    "- Use convertCurrencies when users need price conversions\n"
    "- Present information clearly with relevant details"
)


class OpenAIModelGateway(ModelGateway):
    """
    OpenAI GPT model gateway.

    The SDK client is created on first use, so a missing API key only fails
    the requests that actually need the model.

    Args:
        api_key: OpenAI API key.
        model: Chat model identifier.
        tools: Tool definitions advertised on the first pass.
        base_url: Optional custom endpoint URL (for Azure OpenAI or proxies).
        client: Optional pre-built AsyncOpenAI client (for testing).

    Example:
        >>> gateway = OpenAIModelGateway(api_key="sk-...", tools=registry.list())
        >>> reply = await gateway.ask_with_tool_calling("I am looking for a phone")
        >>> reply.tool_calls[0].name
        'searchProducts'
    """

    def __init__(
        self,
        api_key: Union[SecretStr, str, None] = None,
        model: str = "gpt-3.5-turbo",
        tools: Sequence[ToolDefinition] = (),
        base_url: Optional[str] = None,
        client: Optional[AsyncOpenAI] = None,
    ) -> None:
        if isinstance(api_key, str):
            api_key = SecretStr(api_key)
        self._api_key = api_key
        self._base_url = base_url
        self._client = client
        self.model = model
        self.tools = list(tools)

    @classmethod
    def from_settings(
        cls, settings: Settings, tools: Sequence[ToolDefinition]
    ) -> "OpenAIModelGateway":
        """Build a gateway from application settings."""
        return cls(
            api_key=settings.openai_api_key,
            model=settings.openai_model,
            tools=tools,
        )

    # =========================================================================
    # ModelGateway implementation
    # =========================================================================

    async def ask_with_tool_calling(self, query: str) -> ModelReply:
        """Send the query with function calling enabled."""
        kwargs: dict[str, Any] = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": ASSISTANT_SYSTEM_PROMPT},
                {"role": "user", "content": query},
            ],
        }
        if self.tools:
            kwargs["tools"] = [tool.to_openai_format() for tool in self.tools]
            kwargs["tool_choice"] = "auto"

        response = await self._create(**kwargs)
        return self._to_reply(response)

    async def complete_tool_result(
        self, query: str, directive: ToolCallDirective, result_payload: str
    ) -> ModelReply:
        """Send the tool result back so the model can answer."""
        response = await self._create(
            model=self.model,
            messages=[
                {"role": "system", "content": ASSISTANT_SYSTEM_PROMPT},
                {"role": "user", "content": query},
                {"role": "assistant", "tool_calls": [directive.to_openai_format()]},
                {
                    "role": "tool",
                    "tool_call_id": directive.id,
                    "content": result_payload,
                },
            ],
        )
        return self._to_reply(response)

    # =========================================================================
    # Helper Methods
    # =========================================================================

    @property
    def client(self) -> AsyncOpenAI:
        """The SDK client, created on first use."""
        if self._client is None:
            api_key = self._api_key.get_secret_value() if self._api_key else ""
            if not api_key:
                raise ModelGatewayError(
                    "Missing OPENAI_API_KEY in environment variables",
                    provider=PROVIDER_NAME,
                )
            client_kwargs: dict[str, Any] = {"api_key": api_key}
            if self._base_url:
                client_kwargs["base_url"] = self._base_url
            self._client = AsyncOpenAI(**client_kwargs)
        return self._client

    async def _create(self, **kwargs: Any) -> Any:
        """
        Call chat.completions.create, wrapping SDK errors.

        Raises:
            ModelGatewayError: On any OpenAI API error.
        """
        client = self.client
        try:
            return await client.chat.completions.create(**kwargs)
        except openai.APIStatusError as e:
            logger.error(f"OpenAI request failed with status {e.status_code}: {e}")
            raise ModelGatewayError(
                f"Model request failed: {e}",
                provider=PROVIDER_NAME,
                status_code=e.status_code,
            ) from e
        except openai.APIError as e:
            logger.error(f"OpenAI request failed: {type(e).__name__}: {e}")
            raise ModelGatewayError(
                f"Model request failed: {e}", provider=PROVIDER_NAME
            ) from e

    def _to_reply(self, response: Any) -> ModelReply:
        """
        Transform an OpenAI response into a ModelReply.

        Tool calls without a function (non-function tool types) become
        directives with an empty name, which the agent treats as no tool call.
        """
        if not response.choices:
            return ModelReply()

        message = response.choices[0].message
        directives = [
            ToolCallDirective.from_openai_format(tool_call.model_dump())
            for tool_call in message.tool_calls or []
        ]
        return ModelReply(text=message.content, tool_calls=directives)
