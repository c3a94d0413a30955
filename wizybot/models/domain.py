"""
Domain Models - tool definitions, directives, replies and tool outcomes.

This module contains the internal domain models used by the tool registry,
the tool router, the model gateway and the agent service.

Pattern: Domain models as value objects (frozen Pydantic models)
Pattern: Sum types as small Pydantic models joined with Union

Note: These models are distinct from the HTTP request/response models in
requests.py and responses.py.
"""

import json
from typing import Any, Callable, Optional, Union

from pydantic import BaseModel, Field, field_validator
from pydantic_core import to_jsonable_python


# =============================================================================
# ToolDefinition Model
# =============================================================================


class ToolDefinition(BaseModel):
    """
    Tool definition schema advertised to the language model.

    This is the metadata describing a tool - its name, what it does, and the
    JSON Schema for its parameters. It does not include the handler; see
    RegisteredTool for that.

    Attributes:
        name: Unique tool identifier (the name the model calls).
        description: Human-readable description of what the tool does.
        parameters: JSON Schema defining the tool's input parameters.
        strict: Whether the model is asked to follow the schema exactly.
    """

    name: str = Field(..., description="Unique tool identifier")
    description: Optional[str] = Field(
        default=None, description="Human-readable description"
    )
    parameters: dict[str, Any] = Field(
        ..., description="JSON Schema for input parameters"
    )
    strict: bool = Field(default=True, description="Strict schema adherence")

    model_config = {"frozen": True}

    def to_openai_format(self) -> dict[str, Any]:
        """Render as an OpenAI `tools` entry."""
        function: dict[str, Any] = {
            "name": self.name,
            "parameters": self.parameters,
            "strict": self.strict,
        }
        if self.description:
            function["description"] = self.description
        return {"type": "function", "function": function}


# =============================================================================
# RegisteredTool Model
# =============================================================================


class RegisteredTool(BaseModel):
    """
    A tool with its definition, parameter model and handler.

    The handler is an async callable receiving the validated parameter model
    produced by the argument validator.

    Attributes:
        definition: The tool's metadata (name, description, parameters).
        params_model: Pydantic model the raw arguments are validated into.
        handler: Async callable that executes the tool.
    """

    definition: ToolDefinition
    params_model: type[BaseModel]
    handler: Callable[..., Any] = Field(..., description="Tool execution callable")

    model_config = {"arbitrary_types_allowed": True}

    @property
    def name(self) -> str:
        """Get tool name from definition."""
        return self.definition.name


# =============================================================================
# Raw Tool Arguments (JsonText | StructuredMap)
# =============================================================================


class JsonTextArguments(BaseModel):
    """Tool arguments as the JSON text the model emitted."""

    text: str

    model_config = {"frozen": True}


class StructuredArguments(BaseModel):
    """Tool arguments already decoded into a mapping."""

    values: dict[str, Any] = Field(default_factory=dict)

    model_config = {"frozen": True}


RawArguments = Union[JsonTextArguments, StructuredArguments]


def as_raw_arguments(value: Any) -> RawArguments:
    """
    Wrap a model-provided arguments payload in its RawArguments variant.

    Args:
        value: A JSON string, a mapping, None, or an existing variant.

    Returns:
        JsonTextArguments for strings, StructuredArguments otherwise.
    """
    if isinstance(value, (JsonTextArguments, StructuredArguments)):
        return value
    if isinstance(value, str):
        return JsonTextArguments(text=value)
    if value is None:
        return StructuredArguments()
    if isinstance(value, dict):
        return StructuredArguments(values=value)
    raise TypeError(f"Unsupported tool arguments type: {type(value).__name__}")


# =============================================================================
# ToolCallDirective Model
# =============================================================================


class ToolCallDirective(BaseModel):
    """
    A model's request to execute a specific tool.

    Attributes:
        id: Tool call identifier assigned by the model provider.
        name: Name of the requested tool.
        arguments: Raw, unvalidated arguments.

    Example:
        >>> directive = ToolCallDirective(
        ...     id="call_abc123",
        ...     name="searchProducts",
        ...     arguments='{"query": "phone"}',
        ... )
        >>> directive.arguments
        JsonTextArguments(text='{"query": "phone"}')
    """

    id: str = Field(default="", description="Tool call identifier")
    name: str = Field(..., description="Name of tool to execute")
    arguments: RawArguments = Field(default_factory=StructuredArguments)

    model_config = {"frozen": True}

    @field_validator("arguments", mode="before")
    @classmethod
    def wrap_arguments(cls, v: Any) -> RawArguments:
        """Accept plain strings and mappings for the arguments field."""
        return as_raw_arguments(v)

    @classmethod
    def from_openai_format(cls, tool_call: dict[str, Any]) -> "ToolCallDirective":
        """
        Build a directive from OpenAI's tool_calls format.

        Arguments are kept raw; parsing happens in the argument validator.

        Args:
            tool_call: {"id": ..., "type": "function",
                        "function": {"name": ..., "arguments": "<json>"}}
        """
        function = tool_call.get("function") or {}
        return cls(
            id=tool_call.get("id") or "",
            name=function.get("name") or "",
            arguments=function.get("arguments"),
        )

    def to_openai_format(self) -> dict[str, Any]:
        """Render as an assistant `tool_calls` entry for the follow-up request."""
        if isinstance(self.arguments, JsonTextArguments):
            arguments = self.arguments.text
        else:
            arguments = json.dumps(self.arguments.values)
        return {
            "id": self.id,
            "type": "function",
            "function": {"name": self.name, "arguments": arguments},
        }


# =============================================================================
# ModelReply Model
# =============================================================================


class ModelReply(BaseModel):
    """
    Structured reply from the model gateway.

    Attributes:
        text: Assistant text, if any.
        tool_calls: Tool call directives in the order the model produced them.
    """

    text: Optional[str] = None
    tool_calls: list[ToolCallDirective] = Field(default_factory=list)

    @property
    def first_tool_call(self) -> Optional[ToolCallDirective]:
        """The only directive a turn honors; any others are dropped."""
        return self.tool_calls[0] if self.tool_calls else None


# =============================================================================
# Capability Payloads
# =============================================================================


class ProductRecord(BaseModel):
    """
    Read-only projection of one catalog row.

    price is an opaque display string (e.g. "299.99 USD"), never parsed.
    """

    title: str = "Untitled Product"
    description: str = "No description available"
    price: str = "Price not available"
    url: str = ""
    image_url: str = Field(default="", alias="imageUrl")
    category: str = "Uncategorized"

    model_config = {"frozen": True, "populate_by_name": True}


class ConversionOutcome(BaseModel):
    """
    Result of a currency conversion.

    Attributes:
        amount: The amount that was converted, as requested.
        from_currency: Upper-cased source code.
        to_currency: Upper-cased target code.
        result: Converted amount rounded to 2 decimal places.
        rate: Conversion factor rounded to 6 decimal places.
    """

    amount: Union[int, float]
    from_currency: str = Field(..., alias="fromCurrency")
    to_currency: str = Field(..., alias="toCurrency")
    result: float
    rate: float

    model_config = {"frozen": True, "populate_by_name": True}


# =============================================================================
# ToolOutcome (ToolOutput | ToolUnavailable)
# =============================================================================


class ToolOutput(BaseModel):
    """
    Successful tool execution.

    Attributes:
        name: Name of the tool that ran.
        payload: Capability result (list of ProductRecord or ConversionOutcome).
    """

    name: str
    payload: Any = None

    def payload_json(self) -> str:
        """Serialize the payload for the follow-up model call."""
        return json.dumps(to_jsonable_python(self.payload, by_alias=True))


class ToolUnavailable(BaseModel):
    """The model asked for a tool that is not registered."""

    name: str

    @property
    def message(self) -> str:
        """User-facing text that ends the turn."""
        return f'Tool "{self.name}" is not available.'


ToolOutcome = Union[ToolOutput, ToolUnavailable]
