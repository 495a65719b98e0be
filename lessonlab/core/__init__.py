"""
Core domain layer: exceptions and the verification outcome policy.
"""

from lessonlab.core.exceptions import (
    ContentNotFoundError,
    LessonLabException,
    ProgressPersistenceError,
    QueryExecutionError,
    QueryTimeoutError,
    SandboxConnectionError,
    SandboxRegistryError,
)
from lessonlab.core.outcome import interpret, optional_bool_column

__all__ = [
    "LessonLabException",
    "ContentNotFoundError",
    "SandboxRegistryError",
    "SandboxConnectionError",
    "QueryTimeoutError",
    "QueryExecutionError",
    "ProgressPersistenceError",
    "interpret",
    "optional_bool_column",
]
