"""
Sandbox query execution client.

Runs a verification query against a sandbox inside one read-only
transaction and returns the rows as plain dictionaries.

Dependencies: neo4j, asyncio
System role: Query Execution Client
"""

import asyncio
import logging
from typing import Any

from neo4j import READ_ACCESS, AsyncManagedTransaction
from neo4j.exceptions import (
    AuthError,
    DriverError,
    Neo4jError,
    ServiceUnavailable,
    SessionExpired,
)

from lessonlab.boundary.graph.driver_factory import DriverFactory, SandboxDriverFactory
from lessonlab.core.exceptions import (
    QueryExecutionError,
    QueryTimeoutError,
    SandboxConnectionError,
)
from lessonlab.models.sandbox import SandboxDescriptor

logger = logging.getLogger(__name__)

ResultSet = list[dict[str, Any]]


async def _collect_rows(tx: AsyncManagedTransaction, query: str) -> ResultSet:
    result = await tx.run(query)
    return [dict(record.items()) async for record in result]


class QueryClient:
    """Executes verification queries against sandbox databases."""

    def __init__(
        self,
        driver_factory: DriverFactory | None = None,
        timeout: float = 10.0,
    ) -> None:
        """
        Initialize query client.

        Args:
            driver_factory: Factory opening scoped drivers (defaults to SandboxDriverFactory)
            timeout: Upper bound in seconds for connecting and running the query
        """
        self.driver_factory = driver_factory or SandboxDriverFactory()
        self.timeout = timeout

    async def execute(self, descriptor: SandboxDescriptor, query: str) -> ResultSet:
        """
        Run a query verbatim in a single read transaction.

        Args:
            descriptor: Sandbox connection details
            query: Query text taken from lesson content

        Returns:
            ResultSet: All rows, each a mapping of column name to value

        Raises:
            SandboxConnectionError: Sandbox unreachable or credentials rejected
            QueryTimeoutError: Query did not complete within the timeout
            QueryExecutionError: Query is invalid or failed at runtime
        """
        try:
            return await asyncio.wait_for(self._run(descriptor, query), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            raise QueryTimeoutError(
                f"Verification query exceeded {self.timeout}s",
                address=descriptor.address,
            ) from e

    async def _run(self, descriptor: SandboxDescriptor, query: str) -> ResultSet:
        try:
            async with self.driver_factory.open(descriptor) as driver:
                async with driver.session(default_access_mode=READ_ACCESS) as session:
                    rows = await session.execute_read(_collect_rows, query)
        except AuthError as e:
            raise SandboxConnectionError(
                "Sandbox rejected credentials", address=descriptor.address
            ) from e
        except (ServiceUnavailable, SessionExpired) as e:
            raise SandboxConnectionError(
                "Sandbox is unreachable", address=descriptor.address
            ) from e
        except Neo4jError as e:
            raise QueryExecutionError(
                str(e) or "Verification query failed", code=getattr(e, "code", None)
            ) from e
        except (DriverError, OSError, ValueError) as e:
            raise SandboxConnectionError(
                f"Could not connect to sandbox: {type(e).__name__}",
                address=descriptor.address,
            ) from e

        logger.debug(
            "Verification query executed",
            extra={"address": descriptor.address, "row_count": len(rows)},
        )
        return rows
