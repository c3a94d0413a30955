"""
Request Models - HTTP request bodies.

This module contains Pydantic models for API request validation. Empty or
missing queries are rejected here, before they reach the agent service.
"""

from pydantic import BaseModel, Field


class UserQueryRequest(BaseModel):
    """
    Body of POST /agent.

    Attributes:
        query: Natural language query from the user.
    """

    query: str = Field(
        ...,
        min_length=1,
        description="Natural language query from the user",
        examples=["I am looking for a phone"],
    )
