"""
Application services: progress recording and code-challenge verification.
"""

from lessonlab.application.services.progress_service import ProgressService
from lessonlab.application.services.verification_service import (
    NotVerifiableReason,
    VerificationService,
    VerificationState,
)

__all__ = [
    "ProgressService",
    "VerificationService",
    "VerificationState",
    "NotVerifiableReason",
]
