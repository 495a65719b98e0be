"""
Sandbox driver factory.

Creates one scoped Neo4j driver per sandbox descriptor. There is no
process-wide driver: sandbox credentials change per session, so every
driver is closed as soon as its scope exits.

Dependencies: neo4j
System role: Connection lifecycle for sandbox databases
"""

from collections.abc import AsyncIterator
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import Protocol

from neo4j import AsyncDriver, AsyncGraphDatabase

from lessonlab.models.sandbox import SandboxDescriptor


class DriverFactory(Protocol):
    """Opens a scoped driver for a sandbox."""

    def open(self, descriptor: SandboxDescriptor) -> AbstractAsyncContextManager[AsyncDriver]:
        ...


class SandboxDriverFactory:
    """Neo4j async driver factory keyed on a sandbox descriptor."""

    def __init__(self, connection_timeout: float = 5.0) -> None:
        """
        Initialize factory.

        Args:
            connection_timeout: Seconds to wait for a connection to be established
                or acquired from the driver's own pool
        """
        self.connection_timeout = connection_timeout

    @asynccontextmanager
    async def open(self, descriptor: SandboxDescriptor) -> AsyncIterator[AsyncDriver]:
        """
        Open a driver for the sandbox and close it on exit.

        Args:
            descriptor: Sandbox connection details

        Yields:
            AsyncDriver: Driver bound to the sandbox credentials
        """
        driver = AsyncGraphDatabase.driver(
            descriptor.uri,
            auth=(descriptor.username, descriptor.password.get_secret_value()),
            connection_timeout=self.connection_timeout,
            connection_acquisition_timeout=self.connection_timeout,
            max_connection_pool_size=1,
        )
        try:
            yield driver
        finally:
            await driver.close()
