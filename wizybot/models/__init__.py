"""Models Package - domain models, tool parameter models and HTTP bodies."""

from wizybot.models.domain import (
    ConversionOutcome,
    JsonTextArguments,
    ModelReply,
    ProductRecord,
    RawArguments,
    RegisteredTool,
    StructuredArguments,
    ToolCallDirective,
    ToolDefinition,
    ToolOutcome,
    ToolOutput,
    ToolUnavailable,
)
from wizybot.models.requests import UserQueryRequest
from wizybot.models.responses import AgentResponse, ErrorDetail, ErrorResponse
from wizybot.models.tools import ConversionParams, SearchParams

__all__ = [
    # Domain
    "ConversionOutcome",
    "JsonTextArguments",
    "ModelReply",
    "ProductRecord",
    "RawArguments",
    "RegisteredTool",
    "StructuredArguments",
    "ToolCallDirective",
    "ToolDefinition",
    "ToolOutcome",
    "ToolOutput",
    "ToolUnavailable",
    # Tool parameters
    "ConversionParams",
    "SearchParams",
    # HTTP
    "UserQueryRequest",
    "AgentResponse",
    "ErrorDetail",
    "ErrorResponse",
]
