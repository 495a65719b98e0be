"""
Health check API endpoints.

Routes: GET /health

Dependencies: fastapi
System role: Health check HTTP API
"""

from fastapi import APIRouter
from pydantic import BaseModel

from lessonlab import __version__


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Liveness probe."""
    return HealthResponse(status="ok", message=f"lessonlab {__version__}")
