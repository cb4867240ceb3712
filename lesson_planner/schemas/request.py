"""Lesson form input."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from lesson_planner.utils.constants import (
    DEFAULT_DURATION,
    DEFAULT_GRADE_LEVEL,
    DEFAULT_SUBJECT,
)

GradeLevel = Literal[
    "Kindergarten",
    "Grades 1-2",
    "Grades 3-5",
    "Middle School (Grades 6-8)",
    "High School (Grades 9-12)",
]
Duration = Literal["30 minutes", "45 minutes", "60 minutes", "90 minutes"]


class LessonRequest(BaseModel):
    """The four lesson form fields.

    ``topic`` is accepted as-is; callers check :attr:`is_submittable` before
    generating, the way the form disables its button for a blank topic.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    subject: str = Field(default=DEFAULT_SUBJECT, min_length=1)
    grade_level: GradeLevel = Field(default=DEFAULT_GRADE_LEVEL, alias="gradeLevel")
    duration: Duration = DEFAULT_DURATION
    topic: str = ""

    @property
    def is_submittable(self) -> bool:
        return bool(self.topic.strip())
