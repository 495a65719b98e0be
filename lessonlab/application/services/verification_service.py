"""
Code-challenge verification orchestrator.

Resolves a lesson's verification query, finds the learner's sandbox for
the lesson's use case, runs the query read-only against it, interprets
the result, and records the outcome as a ``_challenge`` attempt.

Every infrastructure failure along the way resolves to the ``False``
sentinel ("could not verify") instead of an exception. Only a missing
lesson propagates.

Dependencies: lessonlab.boundary, lessonlab.core, lessonlab.application.services.progress_service
System role: Verification Orchestrator
"""

import enum
import logging
from typing import Literal, Protocol, Sequence

from lessonlab.core.exceptions import (
    ProgressPersistenceError,
    QueryExecutionError,
    QueryTimeoutError,
    SandboxConnectionError,
    SandboxRegistryError,
)
from lessonlab.core.outcome import ResultSet, interpret
from lessonlab.models.lesson import LessonMetadata
from lessonlab.models.progress import (
    CHALLENGE_ANSWER_ID,
    AnswerSubmission,
    LessonWithProgress,
    User,
)
from lessonlab.models.sandbox import SandboxDescriptor
from lessonlab.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)

NOT_VERIFIABLE_EVENT = "verification.not_verifiable"


class VerificationState(str, enum.Enum):
    """Stages of a verification call."""

    START = "start"
    METADATA_RESOLVED = "metadata_resolved"
    SANDBOX_LOCATED = "sandbox_located"
    QUERY_EXECUTED = "query_executed"
    OUTCOME_COMPUTED = "outcome_computed"
    RECORDED = "recorded"
    NOT_VERIFIABLE = "not_verifiable"


class NotVerifiableReason(str, enum.Enum):
    """Why a verification call ended without a grading outcome."""

    MISSING_USECASE = "missing_usecase"
    MISSING_VERIFY_QUERY = "missing_verify_query"
    NO_SANDBOX = "no_sandbox"
    SANDBOX_REGISTRY_ERROR = "sandbox_registry_error"
    SANDBOX_UNREACHABLE = "sandbox_unreachable"
    QUERY_TIMEOUT = "query_timeout"
    QUERY_FAILED = "query_failed"
    PROGRESS_NOT_SAVED = "progress_not_saved"


class ContentResolver(Protocol):
    async def resolve(self, course: str, module: str, lesson: str) -> LessonMetadata:
        ...


class SandboxLocator(Protocol):
    async def locate(self, token: str, usecase: str) -> SandboxDescriptor | None:
        ...


class QueryExecutor(Protocol):
    async def execute(self, descriptor: SandboxDescriptor, query: str) -> ResultSet:
        ...


class ProgressRecorder(Protocol):
    async def record(
        self,
        user: User,
        course: str,
        module: str,
        lesson: str,
        answers: Sequence[AnswerSubmission],
        metadata: LessonMetadata | None = None,
    ) -> LessonWithProgress:
        ...


class VerificationService:
    """Verification orchestrator composing content, sandbox, query and progress collaborators."""

    def __init__(
        self,
        content: ContentResolver,
        sandboxes: SandboxLocator,
        queries: QueryExecutor,
        progress: ProgressRecorder,
    ) -> None:
        """
        Initialize verification service.

        Args:
            content: Lesson content resolver
            sandboxes: Sandbox locator
            queries: Query execution client
            progress: Progress recorder
        """
        self.content = content
        self.sandboxes = sandboxes
        self.queries = queries
        self.progress = progress

    async def verify(
        self,
        user: User,
        token: str,
        course: str,
        module: str,
        lesson: str,
    ) -> LessonWithProgress | Literal[False]:
        """
        Verify a learner's code challenge and record the outcome.

        Args:
            user: Authenticated learner
            token: Learner session token used to look up the sandbox
            course: Course slug
            module: Module slug
            lesson: Lesson slug

        Returns:
            LessonWithProgress | False: Updated lesson view when the
            verification query ran (pass or fail), ``False`` when it could
            not be verified

        Raises:
            ContentNotFoundError: If the lesson does not exist
        """
        lesson_path = f"{course}/{module}/{lesson}"

        metadata = await self.content.resolve(course, module, lesson)

        if metadata.usecase is None:
            return self._not_verifiable(
                VerificationState.START, NotVerifiableReason.MISSING_USECASE, lesson_path
            )
        if metadata.verify is None:
            return self._not_verifiable(
                VerificationState.START, NotVerifiableReason.MISSING_VERIFY_QUERY, lesson_path
            )

        try:
            sandbox = await self.sandboxes.locate(token, metadata.usecase)
        except SandboxRegistryError as e:
            return self._not_verifiable(
                VerificationState.METADATA_RESOLVED,
                NotVerifiableReason.SANDBOX_REGISTRY_ERROR,
                lesson_path,
                level=logging.WARNING,
                usecase=metadata.usecase,
                error=str(e),
            )

        if sandbox is None:
            return self._not_verifiable(
                VerificationState.METADATA_RESOLVED,
                NotVerifiableReason.NO_SANDBOX,
                lesson_path,
                usecase=metadata.usecase,
            )

        try:
            result_set = await self.queries.execute(sandbox, metadata.verify)
        except QueryTimeoutError as e:
            return self._not_verifiable(
                VerificationState.SANDBOX_LOCATED,
                NotVerifiableReason.QUERY_TIMEOUT,
                lesson_path,
                level=logging.WARNING,
                error=str(e),
            )
        except SandboxConnectionError as e:
            return self._not_verifiable(
                VerificationState.SANDBOX_LOCATED,
                NotVerifiableReason.SANDBOX_UNREACHABLE,
                lesson_path,
                level=logging.WARNING,
                error=str(e),
            )
        except QueryExecutionError as e:
            return self._not_verifiable(
                VerificationState.SANDBOX_LOCATED,
                NotVerifiableReason.QUERY_FAILED,
                lesson_path,
                level=logging.WARNING,
                error=str(e),
            )

        correct = interpret(result_set)
        logger.info(
            "Challenge outcome computed",
            extra={
                "state": VerificationState.OUTCOME_COMPUTED.value,
                "lesson_path": lesson_path,
                "user_sub": user.sub,
                "row_count": len(result_set),
                "correct": correct,
            },
        )

        submission = AnswerSubmission(
            id=CHALLENGE_ANSWER_ID,
            correct=correct,
            answers=[metadata.verify],
        )

        try:
            return await self.progress.record(
                user, course, module, lesson, [submission], metadata=metadata
            )
        except ProgressPersistenceError as e:
            return self._not_verifiable(
                VerificationState.OUTCOME_COMPUTED,
                NotVerifiableReason.PROGRESS_NOT_SAVED,
                lesson_path,
                level=logging.ERROR,
                correct=correct,
                error=str(e),
            )

    def _not_verifiable(
        self,
        state: VerificationState,
        reason: NotVerifiableReason,
        lesson_path: str,
        level: int = logging.INFO,
        **context,
    ) -> Literal[False]:
        log_with_context(
            logger,
            level,
            NOT_VERIFIABLE_EVENT,
            state=state.value,
            reason=reason.value,
            lesson_path=lesson_path,
            **context,
        )
        return False
