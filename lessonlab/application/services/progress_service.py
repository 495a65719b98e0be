"""
Progress recorder service.

Persists answer submissions against a learner's lesson progress and
returns the learner's updated view of the lesson.

Dependencies: sqlalchemy, lessonlab.boundary.db.CRUD, lessonlab.boundary.content
System role: Progress Recorder
"""

import logging
from typing import Protocol, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from lessonlab.boundary.db.base import utcnow
from lessonlab.boundary.db.CRUD.attempt_crud import attempt_crud
from lessonlab.boundary.db.CRUD.progress_crud import progress_crud
from lessonlab.boundary.db.models.attempt_model import LessonAttemptModel
from lessonlab.core.exceptions import ProgressPersistenceError
from lessonlab.models.lesson import LessonMetadata
from lessonlab.models.progress import (
    AnswerSubmission,
    LessonWithProgress,
    RecordedAnswer,
    User,
)
from lessonlab.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)


class LessonResolver(Protocol):
    """Resolves lesson coordinates to lesson metadata."""

    async def resolve(self, course: str, module: str, lesson: str) -> LessonMetadata:
        ...


def _to_recorded(row: LessonAttemptModel) -> RecordedAnswer:
    return RecordedAnswer(
        id=row.answer_id,
        correct=row.correct,
        answers=list(row.answers or []),
        attempts=row.attempt_count,
        updated_at=row.updated_at,
    )


class ProgressService:
    """Progress recorder backed by the SQLAlchemy progress store."""

    def __init__(self, db: AsyncSession, content: LessonResolver) -> None:
        """
        Initialize progress service.

        Args:
            db: Async SQLAlchemy session
            content: Lesson content resolver used to build the lesson view
        """
        self.db = db
        self.content = content

    async def record(
        self,
        user: User,
        course: str,
        module: str,
        lesson: str,
        answers: Sequence[AnswerSubmission],
        metadata: LessonMetadata | None = None,
    ) -> LessonWithProgress:
        """
        Record answer submissions and return the updated lesson view.

        Each entry overwrites the learner's previous submission with the same
        id. The lesson is stamped completed the first time every recorded
        entry is correct.

        Args:
            user: Authenticated learner
            course: Course slug
            module: Module slug
            lesson: Lesson slug
            answers: One or more answer submissions
            metadata: Already-resolved lesson metadata (resolved when omitted)

        Returns:
            LessonWithProgress: Lesson merged with the learner's progress

        Raises:
            ValueError: If no answers are supplied
            ContentNotFoundError: If the lesson does not exist
            ProgressPersistenceError: If the progress store write or read-back fails
        """
        if not answers:
            raise ValueError("At least one answer submission is required")

        if metadata is None:
            metadata = await self.content.resolve(course, module, lesson)

        try:
            for answer in answers:
                await attempt_crud.upsert_answer(
                    self.db,
                    user_sub=user.sub,
                    course=course,
                    module=module,
                    lesson=lesson,
                    answer_id=answer.id,
                    correct=answer.correct,
                    answers=answer.answers,
                )

            rows = await attempt_crud.get_for_lesson(self.db, user.sub, course, module, lesson)
            if rows and all(row.correct for row in rows):
                await progress_crud.mark_completed(
                    self.db, user.sub, course, module, lesson, completed_at=utcnow()
                )

            await self.db.commit()
            view = await self._build_view(user, metadata)
        except SQLAlchemyError as e:
            await self.db.rollback()
            log_exception_with_context(
                logger,
                "Failed to record lesson progress",
                e,
                user_sub=user.sub,
                lesson_path=metadata.coordinates.path,
            )
            raise ProgressPersistenceError(
                "Failed to record lesson progress",
                details={"lesson_path": metadata.coordinates.path},
            ) from e

        logger.info(
            "Lesson progress recorded",
            extra={
                "user_sub": user.sub,
                "lesson_path": metadata.coordinates.path,
                "answer_ids": [answer.id for answer in answers],
            },
        )

        return view

    async def get_lesson_with_progress(
        self,
        user: User,
        course: str,
        module: str,
        lesson: str,
    ) -> LessonWithProgress:
        """
        Read a learner's view of a lesson without recording anything.

        Raises:
            ContentNotFoundError: If the lesson does not exist
        """
        metadata = await self.content.resolve(course, module, lesson)
        return await self._build_view(user, metadata)

    async def _build_view(self, user: User, metadata: LessonMetadata) -> LessonWithProgress:
        coordinates = metadata.coordinates
        rows = await attempt_crud.get_for_lesson(
            self.db, user.sub, coordinates.course, coordinates.module, coordinates.lesson
        )
        progress = await progress_crud.get_for_lesson(
            self.db, user.sub, coordinates.course, coordinates.module, coordinates.lesson
        )
        completed_at = progress.completed_at if progress else None

        return LessonWithProgress(
            lesson=metadata,
            completed=completed_at is not None,
            completed_at=completed_at,
            attempts=sum(row.attempt_count for row in rows),
            answers=[_to_recorded(row) for row in rows],
        )
