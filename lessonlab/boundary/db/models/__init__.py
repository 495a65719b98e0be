"""ORM models for the progress store."""

from lessonlab.boundary.db.models.attempt_model import LessonAttemptModel
from lessonlab.boundary.db.models.progress_model import LessonProgressModel

__all__ = ["LessonAttemptModel", "LessonProgressModel"]
