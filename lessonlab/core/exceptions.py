"""
Exception hierarchy for the lesson verification service.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Only ContentNotFoundError is a hard error at the verification boundary;
the sandbox and query errors are resolved to a "could not verify"
result by the verification orchestrator.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class LessonLabException(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ContentNotFoundError(LessonLabException):
    """Raised when a lesson does not exist in the content store."""

    def __init__(
        self,
        course: str,
        module: str,
        lesson: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize content not found error.

        Args:
            course: Course slug
            module: Module slug
            lesson: Lesson slug
            details: Additional context
        """
        details = details or {}
        details.update({"course": course, "module": module, "lesson": lesson})
        super().__init__(f"Lesson not found: {course}/{module}/{lesson}", details)


class SandboxRegistryError(LessonLabException):
    """Raised when the sandbox registry cannot be queried."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize sandbox registry error.

        Args:
            message: Error message
            status_code: HTTP status returned by the registry, if any
            details: Additional context
        """
        details = details or {}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(message, details)


class SandboxConnectionError(LessonLabException):
    """Raised when a sandbox is unreachable or rejects its credentials."""

    def __init__(
        self,
        message: str,
        address: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize sandbox connection error.

        Args:
            message: Error message
            address: Sandbox address that failed (never includes credentials)
            details: Additional context
        """
        details = details or {}
        if address:
            details["address"] = address
        super().__init__(message, details)


class QueryTimeoutError(SandboxConnectionError):
    """Raised when the verification query does not finish in time."""

    pass


class QueryExecutionError(LessonLabException):
    """Raised when the verification query is invalid or fails at runtime."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize query execution error.

        Args:
            message: Error message
            code: Database error code (e.g. Neo.ClientError.Statement.SyntaxError)
            details: Additional context
        """
        details = details or {}
        if code:
            details["code"] = code
        super().__init__(message, details)


class ProgressPersistenceError(LessonLabException):
    """Raised when an attempt cannot be written to the progress store."""

    pass


class IdentityProviderError(LessonLabException):
    """Raised when the identity provider cannot resolve a session token."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize identity provider error.

        Args:
            message: Error message
            status_code: HTTP status returned by the provider, if any
            details: Additional context
        """
        details = details or {}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(message, details)
