"""
Services Package - business logic orchestration.
"""

from wizybot.services.agent import (
    EMPTY_FOLLOW_UP_TEXT,
    NO_RESPONSE_TEXT,
    AgentService,
)

__all__ = ["AgentService", "NO_RESPONSE_TEXT", "EMPTY_FOLLOW_UP_TEXT"]
