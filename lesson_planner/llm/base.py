"""Plan generator interface."""

from __future__ import annotations

from typing import Any, Protocol

from lesson_planner.prompts.lesson_plan import LessonPrompt


class PlanGenerator(Protocol):
    """One schema-constrained round-trip to a text-generation service."""

    async def generate(self, prompt: LessonPrompt) -> dict[str, Any]:
        """Send ``prompt`` and return the decoded JSON object of the reply."""
        ...
