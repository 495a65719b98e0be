"""
Sandbox graph database boundary: scoped drivers and query execution.
"""

from lessonlab.boundary.graph.driver_factory import DriverFactory, SandboxDriverFactory
from lessonlab.boundary.graph.query_client import QueryClient, ResultSet

__all__ = ["DriverFactory", "SandboxDriverFactory", "QueryClient", "ResultSet"]
