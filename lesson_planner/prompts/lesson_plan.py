"""Lesson plan generation prompt template and response schema."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any

from lesson_planner.schemas.request import LessonRequest

LESSON_PLAN_PROMPT = """\
Generate a comprehensive lesson plan for an educator.

**Instructions:**
1.  The lesson plan must be detailed, practical, and easy for a teacher to follow.
2.  The tone should be professional and supportive.
3.  Create content that is age-appropriate for the specified grade level.
4.  Ensure the activities logically fit within the specified duration.
5.  The 'title' should be creative and relevant to the topic.

**Lesson Details:**
-   **Topic:** {topic}
-   **Subject:** {subject}
-   **Grade Level:** {grade_level}
-   **Total Duration:** {duration}
"""

_STRING_LIST = {"type": "array", "items": {"type": "string"}}


def _strategy_schema(description: str, summary: str, items: str) -> dict[str, Any]:
    return {
        "type": "object",
        "description": description,
        "properties": {
            "description": {"type": "string", "description": summary},
            "items": {**_STRING_LIST, "description": items},
        },
        "required": ["description", "items"],
    }


LESSON_PLAN_RESPONSE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "title": {
            "type": "string",
            "description": "A creative and engaging title for the lesson plan.",
        },
        "subject": {"type": "string"},
        "gradeLevel": {"type": "string"},
        "duration": {"type": "string"},
        "objectives": {
            **_STRING_LIST,
            "description": "A list of 3-5 clear, measurable learning objectives.",
        },
        "materials": {
            **_STRING_LIST,
            "description": "A list of all materials, tools, and resources needed for the lesson.",
        },
        "activities": {
            "type": "array",
            "description": (
                "A step-by-step breakdown of lesson activities, from introduction to conclusion."
            ),
            "items": {
                "type": "object",
                "properties": {
                    "step": {
                        "type": "string",
                        "description": (
                            "The name of the activity step (e.g., 'Introduction', "
                            "'Guided Practice', 'Group Work', 'Conclusion')."
                        ),
                    },
                    "description": {
                        "type": "string",
                        "description": (
                            "A detailed description of the teacher and student actions "
                            "during this step."
                        ),
                    },
                    "time": {
                        "type": "integer",
                        "description": "Estimated time in minutes for this activity step.",
                    },
                },
                "required": ["step", "description", "time"],
            },
        },
        "assessment": _strategy_schema(
            "Methods for assessing student learning.",
            "A brief overview of the assessment strategy "
            "(e.g., 'Formative and summative assessments will be used.').",
            "A list of specific assessment methods "
            "(e.g., 'Class discussion', 'Exit ticket questions', 'Worksheet completion').",
        ),
        "differentiation": _strategy_schema(
            "Strategies to support diverse learners.",
            "A brief overview of the differentiation strategy.",
            "A list of specific accommodations for different learning needs "
            "(e.g., 'Provide sentence starters for struggling writers', "
            "'Offer extension activities for advanced learners').",
        ),
    },
    "required": [
        "title",
        "subject",
        "gradeLevel",
        "duration",
        "objectives",
        "materials",
        "activities",
        "assessment",
        "differentiation",
    ],
}


@dataclass(frozen=True)
class LessonPrompt:
    """Instruction text plus the JSON schema the reply must follow."""

    instruction: str
    response_schema: dict[str, Any] = field(default_factory=dict)


def build_lesson_prompt(request: LessonRequest) -> LessonPrompt:
    """Build the generator prompt for a lesson form submission.

    Parameters
    ----------
    request : LessonRequest

    Returns
    -------
    LessonPrompt
        The instruction with all four form fields embedded verbatim, and a
        private copy of :data:`LESSON_PLAN_RESPONSE_SCHEMA`.
    """
    instruction = LESSON_PLAN_PROMPT.format(
        topic=request.topic,
        subject=request.subject,
        grade_level=request.grade_level,
        duration=request.duration,
    )
    return LessonPrompt(
        instruction=instruction,
        response_schema=copy.deepcopy(LESSON_PLAN_RESPONSE_SCHEMA),
    )
