"""
Challenges router package.

Exports the router for code-challenge endpoints.
"""

from .challenges_router import router

__all__ = ["router"]
