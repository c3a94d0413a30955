"""
Fake Model Gateway - Test Double Implementation

FakeModelGateway implements the real ModelGateway interface without any
network calls. Replies are scripted: the first-pass reply is returned by
ask_with_tool_calling and the follow-up reply by complete_tool_result.

This is NOT mocking - it is a proper implementation of the interface with
deterministic behavior. It is also useful for local development and demos
without an OpenAI key.
"""

from dataclasses import dataclass
from typing import Optional

from wizybot.models.domain import ModelReply, ToolCallDirective
from wizybot.providers.base import ModelGateway


@dataclass(frozen=True)
class ToolResultCall:
    """Arguments received by one complete_tool_result() call."""

    query: str
    directive: ToolCallDirective
    result_payload: str


class FakeModelGateway(ModelGateway):
    """
    Fake model gateway for testing and local development.

    Attributes:
        first_reply: Reply returned by ask_with_tool_calling().
        follow_up_reply: Reply returned by complete_tool_result().
        error_on_ask: Optional exception raised by ask_with_tool_calling().
        error_on_follow_up: Optional exception raised by complete_tool_result().

    Example:
        >>> gateway = FakeModelGateway(
        ...     first_reply=ModelReply(tool_calls=[directive]),
        ...     follow_up_reply=ModelReply(text="Here are two phones"),
        ... )
        >>> await gateway.ask_with_tool_calling("I am looking for a phone")
        >>> len(gateway.ask_calls)
        1
    """

    def __init__(
        self,
        first_reply: Optional[ModelReply] = None,
        follow_up_reply: Optional[ModelReply] = None,
        error_on_ask: Exception | None = None,
        error_on_follow_up: Exception | None = None,
    ) -> None:
        self.first_reply = first_reply or ModelReply(text="Fake response for testing")
        self.follow_up_reply = follow_up_reply or ModelReply(
            text="Fake follow-up response for testing"
        )
        self.error_on_ask = error_on_ask
        self.error_on_follow_up = error_on_follow_up

        # Track calls for test assertions
        self.ask_calls: list[str] = []
        self.follow_up_calls: list[ToolResultCall] = []

    async def ask_with_tool_calling(self, query: str) -> ModelReply:
        self.ask_calls.append(query)
        if self.error_on_ask is not None:
            raise self.error_on_ask
        return self.first_reply

    async def complete_tool_result(
        self, query: str, directive: ToolCallDirective, result_payload: str
    ) -> ModelReply:
        self.follow_up_calls.append(
            ToolResultCall(
                query=query, directive=directive, result_payload=result_payload
            )
        )
        if self.error_on_follow_up is not None:
            raise self.error_on_follow_up
        return self.follow_up_reply
