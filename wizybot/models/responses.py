"""
Response Models - HTTP response bodies.

Anti-Patterns Avoided:
- Optional fields use Optional[T] with explicit None default
"""

from typing import Optional

from pydantic import BaseModel, Field


class AgentResponse(BaseModel):
    """Body returned by POST /agent."""

    response: str = Field(..., description="Assistant answer for the user")


class ErrorDetail(BaseModel):
    """Machine- and human-readable description of a failed request."""

    code: str = Field(..., description="Error code from ErrorCode")
    message: str = Field(..., description="Human-readable error message")
    tool_name: Optional[str] = Field(
        default=None, description="Tool involved in the failure, if any"
    )


class ErrorResponse(BaseModel):
    """Envelope for error responses."""

    error: ErrorDetail
