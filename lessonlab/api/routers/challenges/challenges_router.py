"""
Code-challenge API endpoints.

Routes:
- POST /courses/{course}/{module}/{lesson}/verify - Verify the learner's code challenge
- GET /courses/{course}/{module}/{lesson}/progress - Learner's view of a lesson

Dependencies: lessonlab.application.services, lessonlab.models
System role: Code-challenge HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from lessonlab.api.deps.dependencies import (
    get_current_user,
    get_progress_service,
    get_session_token,
    get_verification_service,
)
from lessonlab.application.services import ProgressService, VerificationService
from lessonlab.models.progress import CHALLENGE_ANSWER_ID, LessonWithProgress, User
from lessonlab.models.verification import VerificationStatus, VerifyChallengeResponse

from .challenge_error_handling import handle_challenge_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/courses", tags=["challenges"])

UNAVAILABLE_MESSAGE = "Verification is unavailable right now, please retry."
PASSED_MESSAGE = "Challenge complete."
FAILED_MESSAGE = "Incorrect, try again."


def map_verification_to_response(
    result: LessonWithProgress | bool,
    correct: bool | None,
) -> VerifyChallengeResponse:
    """Map the orchestrator's result onto the learner-facing response."""
    if not isinstance(result, LessonWithProgress):
        return VerifyChallengeResponse(
            status=VerificationStatus.UNAVAILABLE,
            message=UNAVAILABLE_MESSAGE,
        )

    if correct:
        return VerifyChallengeResponse(
            status=VerificationStatus.PASSED,
            message=PASSED_MESSAGE,
            lesson=result,
        )
    return VerifyChallengeResponse(
        status=VerificationStatus.FAILED,
        message=FAILED_MESSAGE,
        lesson=result,
    )


@router.post(
    "/{course}/{module}/{lesson}/verify",
    response_model=VerifyChallengeResponse,
)
@handle_challenge_errors
async def verify_challenge(
    course: str,
    module: str,
    lesson: str,
    user: User = Depends(get_current_user),
    token: str = Depends(get_session_token),
    verification_service: VerificationService = Depends(get_verification_service),
) -> VerifyChallengeResponse:
    """
    Verify the learner's code challenge against their sandbox.

    Args:
        course: Course slug
        module: Module slug
        lesson: Lesson slug
        user: Authenticated learner (injected)
        token: Session token (injected)
        verification_service: Injected VerificationService

    Returns:
        VerifyChallengeResponse: passed / failed with the updated lesson,
        or unavailable when verification could not be completed

    Raises:
        HTTPException(404): Lesson not found
        HTTPException(500): Unexpected failure
    """
    result = await verification_service.verify(user, token, course, module, lesson)

    correct = None
    if isinstance(result, LessonWithProgress):
        challenge = result.answer(CHALLENGE_ANSWER_ID)
        correct = challenge.correct if challenge else False

    response = map_verification_to_response(result, correct)

    logger.info(
        "Challenge verification finished",
        extra={
            "lesson_path": f"{course}/{module}/{lesson}",
            "user_sub": user.sub,
            "status": response.status.value,
        },
    )
    return response


@router.get(
    "/{course}/{module}/{lesson}/progress",
    response_model=LessonWithProgress,
)
@handle_challenge_errors
async def get_lesson_progress(
    course: str,
    module: str,
    lesson: str,
    user: User = Depends(get_current_user),
    progress_service: ProgressService = Depends(get_progress_service),
) -> LessonWithProgress:
    """
    Get the learner's view of a lesson.

    Raises:
        HTTPException(404): Lesson not found
    """
    return await progress_service.get_lesson_with_progress(user, course, module, lesson)
