"""
Providers Package - model gateway port and its adapters.
"""

from wizybot.providers.base import ModelGateway
from wizybot.providers.fake import FakeModelGateway
from wizybot.providers.openai import ASSISTANT_SYSTEM_PROMPT, OpenAIModelGateway

__all__ = [
    "ModelGateway",
    "FakeModelGateway",
    "OpenAIModelGateway",
    "ASSISTANT_SYSTEM_PROMPT",
]
