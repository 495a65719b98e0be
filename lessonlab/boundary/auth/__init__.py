"""
Identity boundary: resolves session tokens to authenticated learners.
"""

from lessonlab.boundary.auth.identity_client import IdentityClient

__all__ = ["IdentityClient"]
