"""
Sandbox registry client.

Looks up the running database sandbox leased to a learner session for a
given use case. Does NOT provision sandboxes.

Dependencies: httpx, pydantic
System role: Sandbox Locator
"""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from lessonlab.core.exceptions import SandboxRegistryError
from lessonlab.models.sandbox import SandboxDescriptor

logger = logging.getLogger(__name__)

RUNNING_INSTANCES_PATH = "/SandboxGetRunningInstancesForUser"


class SandboxClient:
    """HTTP client for the sandbox registry API."""

    def __init__(
        self,
        api_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize sandbox registry client.

        Args:
            api_url: Base URL of the sandbox registry API
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used to stub the registry in tests)
        """
        self._api_url = api_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    async def get_running_instances(self, token: str) -> list[dict[str, Any]]:
        """
        List the sandboxes currently running for a session.

        Args:
            token: Learner session token, forwarded as a bearer Authorization header

        Returns:
            list[dict]: Raw instance payloads, empty when none are running

        Raises:
            SandboxRegistryError: If the registry is unreachable or misbehaves
        """
        url = f"{self._api_url}{RUNNING_INSTANCES_PATH}"

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.get(url, headers={"Authorization": f"Bearer {token}"})
        except httpx.HTTPError as e:
            raise SandboxRegistryError(
                f"Sandbox registry request failed: {type(e).__name__}",
                details={"url": url},
            ) from e

        if response.status_code == httpx.codes.NOT_FOUND:
            return []

        if response.is_error:
            raise SandboxRegistryError(
                "Sandbox registry returned an error",
                status_code=response.status_code,
                details={"url": url},
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise SandboxRegistryError(
                "Sandbox registry returned invalid JSON",
                status_code=response.status_code,
            ) from e

        if not isinstance(payload, list):
            raise SandboxRegistryError(
                "Sandbox registry returned an unexpected payload",
                status_code=response.status_code,
                details={"payload_type": type(payload).__name__},
            )

        return [item for item in payload if isinstance(item, dict)]

    async def locate(self, token: str, usecase: str) -> SandboxDescriptor | None:
        """
        Find the running sandbox for a session and use case.

        Args:
            token: Learner session token
            usecase: Use case identifier (e.g. "movies")

        Returns:
            SandboxDescriptor | None: Connection details, or None when no
            sandbox is running for this use case

        Raises:
            SandboxRegistryError: If the registry cannot be queried or the
            matching instance has an unusable payload
        """
        instances = await self.get_running_instances(token)

        match = next((item for item in instances if item.get("usecase") == usecase), None)
        if match is None:
            logger.debug(
                "No running sandbox for use case",
                extra={"usecase": usecase, "running_instances": len(instances)},
            )
            return None

        try:
            return SandboxDescriptor.model_validate(match)
        except ValidationError as e:
            raise SandboxRegistryError(
                "Sandbox registry returned an incomplete sandbox",
                details={"usecase": usecase, "errors": e.error_count()},
            ) from e
