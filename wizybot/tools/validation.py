"""
Argument Validator - turns raw model arguments into strict parameter models.

The model's tool arguments arrive either as JSON text or as an already
decoded mapping. They are resolved once here into the tool's parameter
model; nothing downstream touches the raw mapping.

Two failure modes are kept apart:
- MalformedArgumentsError: the payload is not a JSON object at all
- ToolValidationError: the payload parsed but breaks the parameter contract

Pattern: Fail-fast validation at the trust boundary
"""

import json
import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from wizybot.core.exceptions import MalformedArgumentsError, ToolValidationError
from wizybot.models.domain import (
    RawArguments,
    StructuredArguments,
    as_raw_arguments,
)
from wizybot.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)

ParamsT = TypeVar("ParamsT", bound=BaseModel)

VALIDATION_FAILED_PREFIX = "Tool parameter validation failed"


# =============================================================================
# Raw argument parsing
# =============================================================================


def parse_tool_arguments(raw_args: Any) -> StructuredArguments:
    """
    Resolve raw tool arguments into a decoded mapping.

    Args:
        raw_args: JsonTextArguments, StructuredArguments, a JSON string or a
            mapping.

    Returns:
        StructuredArguments holding the decoded mapping.

    Raises:
        MalformedArgumentsError: If JSON text does not parse to an object.
    """
    try:
        arguments: RawArguments = as_raw_arguments(raw_args)
    except TypeError as e:
        raise MalformedArgumentsError(raw_arguments=repr(raw_args)) from e

    if isinstance(arguments, StructuredArguments):
        return arguments

    try:
        decoded = json.loads(arguments.text)
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse tool arguments: {arguments.text!r} ({e})")
        raise MalformedArgumentsError(raw_arguments=arguments.text) from e

    if not isinstance(decoded, dict):
        logger.error(f"Tool arguments are not a JSON object: {arguments.text!r}")
        raise MalformedArgumentsError(raw_arguments=arguments.text)

    return StructuredArguments(values=decoded)


# =============================================================================
# Parameter validation
# =============================================================================


def format_validation_errors(error: ValidationError) -> list[str]:
    """One readable message per invalid field."""
    return [err["msg"] for err in error.errors()]


def validate_arguments(
    tool_name: str, params_model: type[ParamsT], raw_args: Any
) -> ParamsT:
    """
    Validate raw arguments against a parameter model.

    Args:
        tool_name: Tool the arguments are for (used in errors).
        params_model: Pydantic model describing the tool's parameters.
        raw_args: Raw arguments in any accepted form.

    Returns:
        An instance of params_model.

    Raises:
        MalformedArgumentsError: If JSON text cannot be parsed.
        ToolValidationError: If any parameter constraint is violated.
    """
    arguments = parse_tool_arguments(raw_args)
    try:
        return params_model.model_validate(arguments.values)
    except ValidationError as e:
        violations = format_validation_errors(e)
        message = f"{VALIDATION_FAILED_PREFIX}: {'; '.join(violations)}"
        logger.warning(f"{tool_name}: {message}")
        raise ToolValidationError(message, tool_name=tool_name, violations=violations) from e


class ArgumentValidator:
    """
    Validates tool arguments using the parameter models in a registry.

    Example:
        >>> validator = ArgumentValidator(registry)
        >>> params = validator.validate("searchProducts", '{"query": "phone"}')
        >>> params.query
        'phone'
    """

    def __init__(self, registry: ToolRegistry) -> None:
        self.registry = registry

    def validate(self, tool_name: str, raw_args: Any) -> BaseModel:
        """
        Validate arguments for a registered tool.

        Raises:
            ToolNotFoundError: If tool_name is not registered.
            MalformedArgumentsError: If JSON text cannot be parsed.
            ToolValidationError: If any parameter constraint is violated.
        """
        tool = self.registry.get(tool_name)
        return validate_arguments(tool_name, tool.params_model, raw_args)


__all__ = [
    "ArgumentValidator",
    "format_validation_errors",
    "parse_tool_arguments",
    "validate_arguments",
]
