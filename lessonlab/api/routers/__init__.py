"""API routers."""

from .challenges import router as challenges_router
from .health import router as health_router

__all__ = ["challenges_router", "health_router"]
