"""Pipeline state and controller state definitions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from typing_extensions import NotRequired, TypedDict

from lesson_planner.prompts.lesson_plan import LessonPrompt
from lesson_planner.schemas.lesson import LessonPlan
from lesson_planner.schemas.request import LessonRequest


class LessonGraphState(TypedDict):
    """State passed between the generation pipeline nodes.

    Fields
    ------
    request : LessonRequest
        The submitted lesson form.
    prompt : LessonPrompt
        Instruction and response schema built from the request.
    raw_plan : dict[str, Any]
        Decoded JSON object returned by the generator.
    plan : LessonPlan
        Validated plan with subject, grade level and duration echoed from the request.
    """

    request: LessonRequest
    prompt: NotRequired[LessonPrompt]
    raw_plan: NotRequired[dict[str, Any]]
    plan: NotRequired[LessonPlan]


@dataclass(frozen=True)
class Idle:
    status: Literal["idle"] = "idle"


@dataclass(frozen=True)
class Loading:
    request_id: int
    status: Literal["loading"] = "loading"


@dataclass(frozen=True)
class Success:
    request_id: int
    plan: LessonPlan
    status: Literal["success"] = "success"


@dataclass(frozen=True)
class Failure:
    request_id: int
    message: str
    status: Literal["error"] = "error"


ControllerState = Idle | Loading | Success | Failure
