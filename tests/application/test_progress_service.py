"""
Test suite for ProgressService.

Records attempts into an in-memory SQLite progress store and reads
the learner's lesson view back.

System role: Verification of the progress recorder
"""

import logging
from pathlib import Path
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from lessonlab.application.services import ProgressService
from lessonlab.boundary.content import AsciidocLessonStore
from lessonlab.boundary.db.CRUD.progress_crud import progress_crud
from lessonlab.core.exceptions import ContentNotFoundError, ProgressPersistenceError
from lessonlab.models.progress import AnswerSubmission, User

LESSON = ("neo4j-fundamentals", "1-graph-thinking", "2-create-nodes")


@pytest.fixture
def progress_service(test_async_db: AsyncSession, content_root: Path) -> ProgressService:
    """Provide ProgressService bound to the test store and sample content."""
    return ProgressService(db=test_async_db, content=AsciidocLessonStore(content_root))


class TestProgressServiceRecord:
    """Test suite for ProgressService.record()."""

    @pytest.mark.asyncio
    async def test_record_correct_challenge_should_complete_lesson(
        self, progress_service: ProgressService, sample_user: User, challenge_query: str
    ) -> None:
        # Act
        view = await progress_service.record(
            sample_user, *LESSON,
            [AnswerSubmission(id="_challenge", correct=True, answers=[challenge_query])],
        )

        # Assert
        assert view.lesson.title == "Create Nodes"
        assert view.completed is True
        assert view.completed_at is not None
        assert view.attempts == 1
        challenge = view.answer("_challenge")
        assert challenge is not None
        assert challenge.correct is True
        assert challenge.answers == [challenge_query]

    @pytest.mark.asyncio
    async def test_record_incorrect_challenge_should_not_complete_lesson(
        self, progress_service: ProgressService, sample_user: User
    ) -> None:
        view = await progress_service.record(
            sample_user, *LESSON,
            [AnswerSubmission(id="_challenge", correct=False, answers=["q"])],
        )

        assert view.completed is False
        assert view.completed_at is None
        assert view.answer("_challenge").correct is False

    @pytest.mark.asyncio
    async def test_record_twice_should_keep_single_challenge_entry(
        self, progress_service: ProgressService, sample_user: User
    ) -> None:
        # Arrange
        await progress_service.record(
            sample_user, *LESSON, [AnswerSubmission(id="_challenge", correct=False, answers=["q"])]
        )

        # Act
        view = await progress_service.record(
            sample_user, *LESSON, [AnswerSubmission(id="_challenge", correct=True, answers=["q"])]
        )

        # Assert
        assert [answer.id for answer in view.answers] == ["_challenge"]
        assert view.answers[0].attempts == 2
        assert view.attempts == 2
        assert view.completed is True

    @pytest.mark.asyncio
    async def test_record_should_require_every_entry_correct(
        self, progress_service: ProgressService, sample_user: User
    ) -> None:
        view = await progress_service.record(
            sample_user, *LESSON,
            [
                AnswerSubmission(id="q1", correct=True, answers=["a"]),
                AnswerSubmission(id="q2", correct=False, answers=["b"]),
            ],
        )

        assert view.completed is False
        assert len(view.answers) == 2

    @pytest.mark.asyncio
    async def test_record_without_answers_should_raise(
        self, progress_service: ProgressService, sample_user: User
    ) -> None:
        with pytest.raises(ValueError, match="At least one answer"):
            await progress_service.record(sample_user, *LESSON, [])

    @pytest.mark.asyncio
    async def test_record_unknown_lesson_should_raise(
        self, progress_service: ProgressService, sample_user: User
    ) -> None:
        with pytest.raises(ContentNotFoundError):
            await progress_service.record(
                sample_user, "neo4j-fundamentals", "1-graph-thinking", "missing",
                [AnswerSubmission(id="_challenge", correct=True, answers=["q"])],
            )

    @pytest.mark.asyncio
    async def test_record_should_roll_back_on_store_failure(
        self, content_root: Path, sample_user: User
    ) -> None:
        # Arrange
        db = AsyncMock(spec=AsyncSession)
        db.execute = AsyncMock(side_effect=OperationalError("INSERT", {}, Exception("disk full")))
        service = ProgressService(db=db, content=AsciidocLessonStore(content_root))

        # Act & Assert
        with pytest.raises(ProgressPersistenceError):
            await service.record(
                sample_user, *LESSON, [AnswerSubmission(id="_challenge", correct=True, answers=["q"])]
            )

        db.rollback.assert_awaited_once()
        db.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_record_should_wrap_read_back_failure(
        self,
        progress_service: ProgressService,
        sample_user: User,
        monkeypatch: pytest.MonkeyPatch,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        # Arrange
        monkeypatch.setattr(
            progress_crud,
            "get_for_lesson",
            AsyncMock(side_effect=OperationalError("SELECT", {}, Exception("connection dropped"))),
        )

        # Act & Assert
        with caplog.at_level(logging.ERROR):
            with pytest.raises(ProgressPersistenceError) as exc_info:
                await progress_service.record(
                    sample_user, *LESSON,
                    [AnswerSubmission(id="_challenge", correct=False, answers=["q"])],
                )

        assert isinstance(exc_info.value.__cause__, OperationalError)
        record = next(r for r in caplog.records if r.getMessage() == "Failed to record lesson progress")
        assert record.error_type == "OperationalError"
        assert record.lesson_path == "neo4j-fundamentals/1-graph-thinking/2-create-nodes"


class TestProgressServiceRead:
    """Test suite for ProgressService.get_lesson_with_progress()."""

    @pytest.mark.asyncio
    async def test_get_lesson_with_progress_should_be_empty_before_attempts(
        self, progress_service: ProgressService, sample_user: User
    ) -> None:
        view = await progress_service.get_lesson_with_progress(sample_user, *LESSON)

        assert view.completed is False
        assert view.attempts == 0
        assert view.answers == []

    @pytest.mark.asyncio
    async def test_get_lesson_with_progress_should_reflect_other_learners_separately(
        self, progress_service: ProgressService, sample_user: User
    ) -> None:
        other = User(sub="auth0|someone-else")
        await progress_service.record(
            other, *LESSON, [AnswerSubmission(id="_challenge", correct=True, answers=["q"])]
        )

        view = await progress_service.get_lesson_with_progress(sample_user, *LESSON)

        assert view.answers == []
