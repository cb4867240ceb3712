"""Flat plain-text export of a lesson plan."""

from __future__ import annotations

import re

from lesson_planner.schemas.lesson import Activity, Assessment, LessonPlan
from lesson_planner.utils.constants import EXPORT_FILENAME_SUFFIX, EXPORT_TITLE_RULE


def _bullets(items: list[str]) -> str:
    return "\n".join(f"- {item}" for item in items)


def _activity_lines(activities: list[Activity]) -> str:
    return "\n".join(f"- {a.step} ({a.time} mins): {a.description}" for a in activities)


def _section(title: str, content: str) -> str:
    return f"{title}\n{'=' * len(title)}\n{content}\n\n"


def _strategy_section(title: str, strategy: Assessment) -> str:
    return _section(title, f"{strategy.description}\n{_bullets(strategy.items)}")


def export_plan_text(plan: LessonPlan) -> str:
    """Return the plan as the plain-text document offered for download."""
    sections = [
        _section("Learning Objectives", _bullets(plan.objectives)),
        _section("Materials Needed", _bullets(plan.materials)),
        _section("Lesson Activities", _activity_lines(plan.activities)),
        _strategy_section("Assessment & Evaluation", plan.assessment),
        _strategy_section("Differentiation & Accommodations", plan.differentiation),
    ]
    document = (
        f"\n{plan.title.upper()}\n{EXPORT_TITLE_RULE}\n\n"
        f"Subject: {plan.subject}\n"
        f"Grade Level: {plan.grade_level}\n"
        f"Duration: {plan.duration}\n\n"
        + "\n".join(sections)
        + "\n"
    )
    return document.strip()


def export_filename(title: str) -> str:
    """``"Water Cycle Basics"`` -> ``"water_cycle_basics_lesson_plan.txt"``."""
    return re.sub(r"\s+", "_", title).lower() + EXPORT_FILENAME_SUFFIX
