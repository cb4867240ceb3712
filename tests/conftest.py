"""Shared fixtures: a sample generator reply and a scripted generator stub."""

import copy

import pytest

from lesson_planner.schemas.lesson import LessonPlan


def _raw_plan() -> dict:
    return {
        "title": "Water Cycle Basics",
        "subject": "Generated Subject",
        "gradeLevel": "Generated Grade",
        "duration": "Generated Duration",
        "objectives": [
            "Describe evaporation",
            "Explain condensation",
            "Identify forms of precipitation",
        ],
        "materials": ["Clear cup", "Ice cubes"],
        "activities": [
            {"step": "Introduction", "description": "Ask where rain comes from.", "time": 5},
            {"step": "Guided Practice", "description": "Model the cycle in a cup.", "time": 25},
            {"step": "Conclusion", "description": "Exit ticket.", "time": 15},
        ],
        "assessment": {
            "description": "Formative checks throughout.",
            "items": ["Class discussion", "Exit ticket questions"],
        },
        "differentiation": {
            "description": "Support for diverse learners.",
            "items": ["Sentence starters", "Extension diagram"],
        },
    }


class StubGenerator:
    """Records prompts and returns a scripted reply or raises a scripted error."""

    def __init__(self, result=None, exc: Exception | None = None):
        self.result = result
        self.exc = exc
        self.calls = []

    async def generate(self, prompt):
        self.calls.append(prompt)
        if self.exc is not None:
            raise self.exc
        return copy.deepcopy(self.result)


@pytest.fixture
def raw_plan() -> dict:
    return _raw_plan()


@pytest.fixture
def lesson_plan() -> LessonPlan:
    data = _raw_plan()
    data.update(subject="Science", gradeLevel="Grades 3-5", duration="45 minutes")
    return LessonPlan.model_validate(data)


@pytest.fixture
def stub_generator():
    return StubGenerator
