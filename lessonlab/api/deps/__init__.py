"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_current_user,
    get_identity_client,
    get_progress_service,
    get_service_cache,
    get_session_token,
    get_verification_service,
)

__all__ = [
    "get_current_user",
    "get_identity_client",
    "get_progress_service",
    "get_service_cache",
    "get_session_token",
    "get_verification_service",
]
