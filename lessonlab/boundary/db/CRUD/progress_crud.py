"""
Lesson progress CRUD operations.

Dependencies: sqlalchemy, lessonlab.boundary.db.models
System role: Lesson completion persistence operations
"""

from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from lessonlab.boundary.db.CRUD.base_crud import BaseCRUD
from lessonlab.boundary.db.models.progress_model import LessonProgressModel


class ProgressCRUD(BaseCRUD[LessonProgressModel]):
    """CRUD operations for LessonProgressModel."""

    def __init__(self) -> None:
        """Initialize ProgressCRUD with LessonProgressModel."""
        super().__init__(LessonProgressModel)

    async def get_for_lesson(
        self,
        session: AsyncSession,
        user_sub: str,
        course: str,
        module: str,
        lesson: str,
    ) -> LessonProgressModel | None:
        """
        Retrieve a learner's progress row for a lesson.

        Returns:
            LessonProgressModel if the learner has progress on the lesson, None otherwise
        """
        stmt = select(LessonProgressModel).where(
            LessonProgressModel.user_sub == user_sub,
            LessonProgressModel.course == course,
            LessonProgressModel.module == module,
            LessonProgressModel.lesson == lesson,
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def mark_completed(
        self,
        session: AsyncSession,
        user_sub: str,
        course: str,
        module: str,
        lesson: str,
        completed_at: datetime,
    ) -> LessonProgressModel:
        """
        Stamp a lesson as completed unless it already is.

        Args:
            session: Async database session
            user_sub: Learner identity subject
            course: Course slug
            module: Module slug
            lesson: Lesson slug
            completed_at: Completion timestamp to record on first completion

        Returns:
            The progress row, with its original completed_at if already completed
        """
        progress = await self.get_for_lesson(session, user_sub, course, module, lesson)

        if progress is None:
            return await self.create(
                session,
                user_sub=user_sub,
                course=course,
                module=module,
                lesson=lesson,
                completed_at=completed_at,
            )

        if progress.completed_at is None:
            progress.completed_at = completed_at
            await session.flush()
            await session.refresh(progress)
        return progress


progress_crud = ProgressCRUD()
