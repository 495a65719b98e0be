"""
Learner progress domain models.

Answer submissions and the lesson-with-progress view returned after an
attempt is recorded.

Dependencies: pydantic
System role: Progress recorder contracts
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from lessonlab.models.lesson import LessonMetadata

CHALLENGE_ANSWER_ID = "_challenge"


class User(BaseModel):
    """Authenticated learner."""

    model_config = ConfigDict(frozen=True)

    sub: str = Field(..., min_length=1, description="Identity provider subject")
    email: str | None = None
    name: str | None = None


class AnswerSubmission(BaseModel):
    """One answer entry submitted against a lesson."""

    id: str = Field(..., min_length=1, description="Question identifier (``_challenge`` for code challenges)")
    correct: bool
    answers: list[str] = Field(default_factory=list, description="Submitted answer content")


class RecordedAnswer(AnswerSubmission):
    """Answer entry as held by the progress store."""

    attempts: int = Field(1, ge=1, description="Number of times this entry was submitted")
    updated_at: datetime


class LessonWithProgress(BaseModel):
    """Lesson metadata merged with the learner's progress on it."""

    lesson: LessonMetadata
    completed: bool = False
    completed_at: datetime | None = None
    attempts: int = Field(0, ge=0, description="Total submissions across all answer entries")
    answers: list[RecordedAnswer] = Field(default_factory=list)

    def answer(self, answer_id: str) -> RecordedAnswer | None:
        """Return the recorded entry for a question, if any."""
        return next((a for a in self.answers if a.id == answer_id), None)
