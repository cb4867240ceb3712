"""Schemas for generated lesson plans."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class BaseLessonModel(BaseModel):
    # Wire names are camelCase (gradeLevel); attributes stay snake_case.
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Activity(BaseLessonModel):
    step: str
    description: str
    time: int = Field(gt=0)


class Assessment(BaseLessonModel):
    description: str
    items: list[str] = Field(default_factory=list)


class GeneratedLessonPlan(BaseLessonModel):
    """Lesson plan as returned by the generator.

    ``subject``, ``grade_level`` and ``duration`` are optional here because
    they are always overwritten with the request's values.
    """

    title: str = Field(min_length=1)
    subject: str | None = None
    grade_level: str | None = Field(default=None, alias="gradeLevel")
    duration: str | None = None
    objectives: list[str]
    materials: list[str]
    activities: list[Activity]
    assessment: Assessment
    differentiation: Assessment


class LessonPlan(BaseLessonModel):
    title: str = Field(min_length=1)
    subject: str
    grade_level: str = Field(alias="gradeLevel")
    duration: str
    objectives: list[str]
    materials: list[str] = Field(default_factory=list)
    activities: list[Activity]
    assessment: Assessment
    differentiation: Assessment

    @classmethod
    def from_generated(
        cls,
        generated: GeneratedLessonPlan,
        *,
        subject: str,
        grade_level: str,
        duration: str,
    ) -> "LessonPlan":
        """Build a plan whose subject, grade level and duration match the request."""
        data = generated.model_dump(exclude={"subject", "grade_level", "duration"})
        return cls(subject=subject, grade_level=grade_level, duration=duration, **data)
