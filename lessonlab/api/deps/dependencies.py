"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: lessonlab.configs, lessonlab.application, lessonlab.boundary
System role: DI container for service injection
"""

from fastapi import Depends, Header, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from lessonlab.application.services import ProgressService, VerificationService
from lessonlab.boundary.auth import IdentityClient
from lessonlab.boundary.content import AsciidocLessonStore
from lessonlab.boundary.db import get_async_db
from lessonlab.boundary.graph import QueryClient, SandboxDriverFactory
from lessonlab.boundary.sandbox import SandboxClient
from lessonlab.configs import get_settings
from lessonlab.core.exceptions import IdentityProviderError
from lessonlab.models.progress import User


class ServiceCache:
    """Container for cached, stateless collaborator instances."""

    def __init__(self):
        self._content_store = None
        self._sandbox_client = None
        self._query_client = None
        self._identity_client = None

    @property
    def content_store(self) -> AsciidocLessonStore:
        """Get cached lesson content store."""
        if self._content_store is None:
            self._content_store = AsciidocLessonStore(get_settings().content.root_dir)
        return self._content_store

    @property
    def sandbox_client(self) -> SandboxClient:
        """Get cached sandbox registry client."""
        if self._sandbox_client is None:
            sandbox = get_settings().sandbox
            self._sandbox_client = SandboxClient(
                api_url=sandbox.api_url,
                timeout=sandbox.request_timeout_seconds,
            )
        return self._sandbox_client

    @property
    def query_client(self) -> QueryClient:
        """Get cached query execution client (drivers are still opened per call)."""
        if self._query_client is None:
            verification = get_settings().verification
            self._query_client = QueryClient(
                driver_factory=SandboxDriverFactory(
                    connection_timeout=verification.connection_timeout_seconds,
                ),
                timeout=verification.query_timeout_seconds,
            )
        return self._query_client

    @property
    def identity_client(self) -> IdentityClient:
        """Get cached identity provider client."""
        if self._identity_client is None:
            auth = get_settings().auth
            self._identity_client = IdentityClient(
                userinfo_url=auth.userinfo_url,
                timeout=auth.request_timeout_seconds,
            )
        return self._identity_client

    def clear(self) -> None:
        """Clear all cached instances."""
        self._content_store = None
        self._sandbox_client = None
        self._query_client = None
        self._identity_client = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_session_token(authorization: str | None = Header(default=None)) -> str:
    """
    Extract the learner's session token from the Authorization header.

    Raises:
        HTTPException(401): Header missing or empty
    """
    if not authorization:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Session token required",
        )
    scheme, _, credentials = authorization.partition(" ")
    token = credentials.strip() if scheme.lower() == "bearer" else authorization.strip()
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Session token required",
        )
    return token


def get_identity_client() -> IdentityClient:
    """Get identity provider client."""
    return get_service_cache().identity_client


async def get_current_user(
    request: Request,
    token: str = Depends(get_session_token),
    identity: IdentityClient = Depends(get_identity_client),
) -> User:
    """
    Get the learner that owns the session token.

    A user already placed on request.state by an upstream auth layer is
    reused; otherwise the token is resolved through the identity provider.

    Args:
        request: Incoming request
        token: Session token (injected via Depends)
        identity: Identity provider client (injected via Depends)

    Returns:
        User: Authenticated learner

    Raises:
        HTTPException(401): Token rejected by the identity provider
        HTTPException(503): Identity provider unavailable
    """
    user = getattr(request.state, "user", None)
    if isinstance(user, User):
        return user

    try:
        user = await identity.get_user(token)
    except IdentityProviderError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Authentication service unavailable",
        ) from e

    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )

    request.state.user = user
    return user


def get_progress_service(db: AsyncSession = Depends(get_async_db)) -> ProgressService:
    """
    Get progress service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        ProgressService: Progress recorder bound to the request's session
    """
    return ProgressService(db=db, content=get_service_cache().content_store)


def get_verification_service(
    progress: ProgressService = Depends(get_progress_service),
) -> VerificationService:
    """
    Get verification service instance.

    Args:
        progress: Progress recorder (injected via Depends)

    Returns:
        VerificationService: Verification orchestrator
    """
    cache = get_service_cache()
    return VerificationService(
        content=cache.content_store,
        sandboxes=cache.sandbox_client,
        queries=cache.query_client,
        progress=progress,
    )
