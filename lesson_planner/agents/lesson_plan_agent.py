"""Lesson plan pipeline nodes and the generation entry point."""

import logging

from lesson_planner.errors import GenerationError
from lesson_planner.llm.base import PlanGenerator
from lesson_planner.models.state import LessonGraphState
from lesson_planner.prompts.lesson_plan import build_lesson_prompt
from lesson_planner.schemas.lesson import GeneratedLessonPlan, LessonPlan
from lesson_planner.schemas.request import LessonRequest

logger = logging.getLogger("uvicorn.error")

GENERATION_FAILED_MESSAGE = "Failed to communicate with the AI model."


def prompt_node(state: LessonGraphState) -> dict:
    """Build the instruction and response schema.

    Populates: prompt.
    """
    return {"prompt": build_lesson_prompt(state["request"])}


def make_generate_node(generator: PlanGenerator):
    """Return a node that sends the prompt to ``generator``.

    Populates: raw_plan.
    """

    async def generate_node(state: LessonGraphState) -> dict:
        logger.info("Lesson plan LLM call started")
        raw_plan = await generator.generate(state["prompt"])
        logger.info("Lesson plan LLM call finished")
        return {"raw_plan": raw_plan}

    return generate_node


def finalize_node(state: LessonGraphState) -> dict:
    """Validate the generated object and echo the form fields into it.

    Populates: plan.

    Raises
    ------
    pydantic.ValidationError
        If the reply is missing a required field or has the wrong shape.
    """
    request = state["request"]
    generated = GeneratedLessonPlan.model_validate(state["raw_plan"])
    plan = LessonPlan.from_generated(
        generated,
        subject=request.subject,
        grade_level=request.grade_level,
        duration=request.duration,
    )
    return {"plan": plan}


async def generate_lesson_plan(
    request: LessonRequest, generator: PlanGenerator, graph=None
) -> LessonPlan:
    """Run one generation for ``request``.

    Parameters
    ----------
    request : LessonRequest
    generator : PlanGenerator
    graph : optional
        A compiled pipeline; built from ``generator`` when omitted.

    Returns
    -------
    LessonPlan

    Raises
    ------
    GenerationError
        For any transport, decoding or validation failure. The underlying
        exception is chained as ``__cause__``.
    """
    if graph is None:
        from lesson_planner.graph.builder import build_graph

        graph = build_graph(generator)
    try:
        result = await graph.ainvoke({"request": request})
    except Exception as exc:
        logger.error("Lesson plan generation failed: %s", exc)
        raise GenerationError(GENERATION_FAILED_MESSAGE) from exc
    return result["plan"]
