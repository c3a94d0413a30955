"""
Tools Package - Tool Registry, Argument Validation and Routing.

This package provides the tool registry for managing available tools, the
validator for their arguments and the router that executes a tool call.
"""

from wizybot.tools.registry import ToolRegistry, create_default_registry
from wizybot.tools.router import ToolRouter
from wizybot.tools.validation import ArgumentValidator, parse_tool_arguments

__all__ = [
    "ToolRegistry",
    "create_default_registry",
    "ToolRouter",
    "ArgumentValidator",
    "parse_tool_arguments",
]
