"""
Agent Router - POST /agent.

Accepts a user query and returns the assistant's answer. Failures raised
by the agent service are translated by the handlers in api/errors.py.
"""

import logging

from fastapi import APIRouter, Depends

from wizybot.api.deps import get_agent_service
from wizybot.models.requests import UserQueryRequest
from wizybot.models.responses import AgentResponse, ErrorResponse
from wizybot.services.agent import AgentService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/agent", tags=["Agent"])


@router.post(
    "",
    response_model=AgentResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid tool arguments"},
        429: {"model": ErrorResponse, "description": "Rate source limit reached"},
        500: {"model": ErrorResponse, "description": "Server misconfiguration"},
        502: {"model": ErrorResponse, "description": "Upstream failure"},
    },
)
async def ask_agent(
    request: UserQueryRequest,
    agent_service: AgentService = Depends(get_agent_service),
) -> AgentResponse:
    """
    Answer a shopping or currency question.

    Example:
        POST /agent {"query": "I am looking for a phone"}
        -> {"response": "Here are two phones you might like: ..."}
    """
    logger.debug(f"Agent query received ({len(request.query)} chars)")
    answer = await agent_service.handle_query(request.query)
    return AgentResponse(response=answer)
