"""
Lesson progress ORM model.

Tracks lesson completion per learner. A lesson is completed once every
recorded answer entry for it is correct; completed_at is stamped on the
first such transition and kept afterwards.

Dependencies: sqlalchemy, lessonlab.boundary.db.base
System role: Lesson completion persistence
"""

from datetime import datetime

from sqlalchemy import DateTime, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from lessonlab.boundary.db.base import Base, TimestampMixin, UUIDMixin


class LessonProgressModel(Base, UUIDMixin, TimestampMixin):
    """Completion state of one lesson for one learner."""

    __tablename__ = "lesson_progress"
    __table_args__ = (
        UniqueConstraint("user_sub", "course", "module", "lesson", name="uq_lesson_progress"),
    )

    user_sub: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    course: Mapped[str] = mapped_column(String(255), nullable=False)
    module: Mapped[str] = mapped_column(String(255), nullable=False)
    lesson: Mapped[str] = mapped_column(String(255), nullable=False)

    completed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
    )
