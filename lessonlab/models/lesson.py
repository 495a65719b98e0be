"""
Lesson domain models.

Lesson coordinates and the read-only metadata projection used by
code-challenge verification.

Dependencies: pydantic
System role: Lesson content contracts
"""

from pydantic import BaseModel, ConfigDict, Field


class LessonCoordinates(BaseModel):
    """Composite key identifying one lesson within one course."""

    model_config = ConfigDict(frozen=True)

    course: str = Field(..., min_length=1, description="Course slug")
    module: str = Field(..., min_length=1, description="Module slug")
    lesson: str = Field(..., min_length=1, description="Lesson slug")

    @property
    def path(self) -> str:
        """Slash-separated lesson path, e.g. ``neo4j-fundamentals/1-graph/2-nodes``."""
        return f"{self.course}/{self.module}/{self.lesson}"


class LessonMetadata(BaseModel):
    """Declarative lesson attributes read from the content store."""

    model_config = ConfigDict(frozen=True)

    coordinates: LessonCoordinates
    title: str | None = Field(None, description="Lesson title")
    type: str | None = Field(None, description="Lesson type (lesson, quiz, challenge)")
    order: int | None = Field(None, description="Position of the lesson within its module")
    usecase: str | None = Field(None, description="Sandbox use case required by the lesson")
    verify: str | None = Field(None, description="Verification query projecting an outcome column")
