"""Response schemas for the lesson plan endpoints."""

from typing import Literal

from pydantic import BaseModel

from lesson_planner.models.state import ControllerState, Failure, Success
from lesson_planner.schemas.lesson import LessonPlan


class FormOptions(BaseModel):
    """Choices and defaults for the lesson form."""

    grade_levels: list[str]
    durations: list[str]
    defaults: dict[str, str]


class PlanStateResponse(BaseModel):
    """Current result area: exactly one of idle, loading, success or error."""

    status: Literal["idle", "loading", "success", "error"]
    plan: LessonPlan | None = None
    error: str | None = None

    @classmethod
    def from_state(cls, state: ControllerState) -> "PlanStateResponse":
        if isinstance(state, Success):
            return cls(status=state.status, plan=state.plan)
        if isinstance(state, Failure):
            return cls(status=state.status, error=state.message)
        return cls(status=state.status)
