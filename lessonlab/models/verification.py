"""
Verification API schemas.

Dependencies: pydantic
System role: Code-challenge verification API contracts
"""

from enum import Enum

from pydantic import BaseModel

from lessonlab.models.progress import LessonWithProgress


class VerificationStatus(str, Enum):
    """
    Outcome of a verification request as seen by the learner.

    PASSED: Verification query ran and reported success
    FAILED: Verification query ran and reported failure ("incorrect, try again")
    UNAVAILABLE: Verification could not be completed ("please retry")
    """

    PASSED = "passed"
    FAILED = "failed"
    UNAVAILABLE = "unavailable"


class VerifyChallengeResponse(BaseModel):
    """Response schema for a code-challenge verification request."""

    status: VerificationStatus
    message: str
    lesson: LessonWithProgress | None = None
