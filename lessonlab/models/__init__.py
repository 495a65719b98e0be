"""Domain models and API schemas."""

from lessonlab.models.lesson import LessonCoordinates, LessonMetadata
from lessonlab.models.progress import (
    CHALLENGE_ANSWER_ID,
    AnswerSubmission,
    LessonWithProgress,
    RecordedAnswer,
    User,
)
from lessonlab.models.sandbox import SandboxDescriptor
from lessonlab.models.verification import VerificationStatus, VerifyChallengeResponse

__all__ = [
    "CHALLENGE_ANSWER_ID",
    "AnswerSubmission",
    "LessonCoordinates",
    "LessonMetadata",
    "LessonWithProgress",
    "RecordedAnswer",
    "SandboxDescriptor",
    "User",
    "VerificationStatus",
    "VerifyChallengeResponse",
]
