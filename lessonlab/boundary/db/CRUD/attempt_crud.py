"""
Lesson attempt CRUD operations.

Provides upsert and per-lesson listing of answer entries.

Dependencies: sqlalchemy, lessonlab.boundary.db.models
System role: Attempt persistence operations
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from lessonlab.boundary.db.CRUD.base_crud import BaseCRUD
from lessonlab.boundary.db.base import utcnow
from lessonlab.boundary.db.models.attempt_model import LessonAttemptModel


class AttemptCRUD(BaseCRUD[LessonAttemptModel]):
    """CRUD operations for LessonAttemptModel."""

    def __init__(self) -> None:
        """Initialize AttemptCRUD with LessonAttemptModel."""
        super().__init__(LessonAttemptModel)

    async def get_for_lesson(
        self,
        session: AsyncSession,
        user_sub: str,
        course: str,
        module: str,
        lesson: str,
    ) -> Sequence[LessonAttemptModel]:
        """
        Retrieve all answer entries a learner recorded for a lesson.

        Args:
            session: Async database session
            user_sub: Learner identity subject
            course: Course slug
            module: Module slug
            lesson: Lesson slug

        Returns:
            Sequence of entries ordered by answer id
        """
        stmt = (
            select(LessonAttemptModel)
            .where(
                LessonAttemptModel.user_sub == user_sub,
                LessonAttemptModel.course == course,
                LessonAttemptModel.module == module,
                LessonAttemptModel.lesson == lesson,
            )
            .order_by(LessonAttemptModel.answer_id)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def upsert_answer(
        self,
        session: AsyncSession,
        user_sub: str,
        course: str,
        module: str,
        lesson: str,
        answer_id: str,
        correct: bool,
        answers: list[str],
    ) -> LessonAttemptModel:
        """
        Insert an answer entry or overwrite the existing one.

        Overwriting keeps a single row per entry and increments its
        attempt counter.

        Args:
            session: Async database session
            user_sub: Learner identity subject
            course: Course slug
            module: Module slug
            lesson: Lesson slug
            answer_id: Question identifier
            correct: Whether the submission was correct
            answers: Submitted answer content

        Returns:
            The stored entry
        """
        stmt = select(LessonAttemptModel).where(
            LessonAttemptModel.user_sub == user_sub,
            LessonAttemptModel.course == course,
            LessonAttemptModel.module == module,
            LessonAttemptModel.lesson == lesson,
            LessonAttemptModel.answer_id == answer_id,
        )
        result = await session.execute(stmt)
        existing = result.scalar_one_or_none()

        if existing is None:
            return await self.create(
                session,
                user_sub=user_sub,
                course=course,
                module=module,
                lesson=lesson,
                answer_id=answer_id,
                correct=correct,
                answers=list(answers),
                attempt_count=1,
            )

        existing.correct = correct
        existing.answers = list(answers)
        existing.attempt_count = existing.attempt_count + 1
        existing.updated_at = utcnow()
        await session.flush()
        await session.refresh(existing)
        return existing


attempt_crud = AttemptCRUD()
