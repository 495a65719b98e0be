"""
Lesson attempt ORM model.

One row per answer entry a learner has submitted for a lesson. Code
challenges use the fixed answer id ``_challenge``; re-submitting an entry
overwrites it and increments its attempt counter.

Dependencies: sqlalchemy, lessonlab.boundary.db.base
System role: Attempt persistence for learner progress
"""

from sqlalchemy import JSON, Boolean, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from lessonlab.boundary.db.base import Base, TimestampMixin, UUIDMixin


class LessonAttemptModel(Base, UUIDMixin, TimestampMixin):
    """
    Latest submission of one answer entry for one learner and lesson.

    Attributes:
        id: UUID primary key (auto-generated)
        user_sub: Learner identity subject
        course: Course slug
        module: Module slug
        lesson: Lesson slug
        answer_id: Question identifier (``_challenge`` for code challenges)
        correct: Whether the latest submission was correct
        answers: Latest submitted answer content
        attempt_count: Number of submissions for this entry
        created_at: First submission timestamp (UTC)
        updated_at: Latest submission timestamp (UTC)

    Constraints:
        (user_sub, course, module, lesson, answer_id): UNIQUE
    """

    __tablename__ = "lesson_attempts"
    __table_args__ = (
        UniqueConstraint(
            "user_sub", "course", "module", "lesson", "answer_id",
            name="uq_lesson_attempts_entry",
        ),
    )

    user_sub: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    course: Mapped[str] = mapped_column(String(255), nullable=False)
    module: Mapped[str] = mapped_column(String(255), nullable=False)
    lesson: Mapped[str] = mapped_column(String(255), nullable=False)
    answer_id: Mapped[str] = mapped_column(String(255), nullable=False)

    correct: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    answers: Mapped[list] = mapped_column(
        JSON,
        nullable=False,
        default=list,
        doc="Submitted answer content (query text for code challenges)",
    )

    attempt_count: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
