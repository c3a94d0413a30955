"""
Health Router - liveness endpoint.
"""

from fastapi import APIRouter
from pydantic import BaseModel

from wizybot import __version__

router = APIRouter(tags=["Health"])


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Report that the process is up. No dependency checks."""
    return HealthResponse(status="healthy", version=__version__)
