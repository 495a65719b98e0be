"""
Progress store boundary: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Async connection management
  - LessonAttemptModel, LessonProgressModel: Progress entities
  - attempt_crud, progress_crud: CRUD operation singletons

Dependencies: sqlalchemy, lessonlab.configs
System role: Database adapter providing persistent storage for learner progress
"""

from lessonlab.boundary.db.base import Base, TimestampMixin, UUIDMixin
from lessonlab.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from lessonlab.boundary.db.models import LessonAttemptModel, LessonProgressModel
from lessonlab.boundary.db.CRUD import (
    AttemptCRUD,
    BaseCRUD,
    ProgressCRUD,
    attempt_crud,
    progress_crud,
)

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "LessonAttemptModel",
    "LessonProgressModel",
    # CRUD
    "BaseCRUD",
    "AttemptCRUD",
    "ProgressCRUD",
    "attempt_crud",
    "progress_crud",
]
