"""
Identity provider client.

Resolves a learner's session token to the authenticated user through
the provider's OpenID Connect userinfo endpoint.

Dependencies: httpx, pydantic
System role: Request authentication
"""

import logging

import httpx
from pydantic import ValidationError

from lessonlab.core.exceptions import IdentityProviderError
from lessonlab.models.progress import User

logger = logging.getLogger(__name__)

REJECTED_STATUSES = frozenset({httpx.codes.UNAUTHORIZED, httpx.codes.FORBIDDEN})


class IdentityClient:
    """HTTP client for the identity provider's userinfo endpoint."""

    def __init__(
        self,
        userinfo_url: str,
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize identity client.

        Args:
            userinfo_url: OpenID Connect userinfo endpoint
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used to stub the provider in tests)
        """
        self._userinfo_url = userinfo_url
        self._timeout = timeout
        self._transport = transport

    async def get_user(self, token: str) -> User | None:
        """
        Resolve a session token to the learner it belongs to.

        Args:
            token: Learner session token

        Returns:
            User | None: Authenticated learner, or None when the provider
            rejects the token

        Raises:
            IdentityProviderError: If the provider is unreachable or misbehaves
        """
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.get(
                    self._userinfo_url, headers={"Authorization": f"Bearer {token}"}
                )
        except httpx.HTTPError as e:
            raise IdentityProviderError(
                f"Userinfo request failed: {type(e).__name__}",
            ) from e

        if response.status_code in REJECTED_STATUSES:
            logger.info("Session token rejected", extra={"status_code": response.status_code})
            return None

        if response.is_error:
            raise IdentityProviderError(
                "Identity provider returned an error",
                status_code=response.status_code,
            )

        try:
            return User.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise IdentityProviderError(
                "Identity provider returned an unusable profile",
                status_code=response.status_code,
            ) from e
