"""FastAPI application exposing the lesson plan form, result, export and print."""

from contextlib import asynccontextmanager
import logging
from urllib.parse import quote

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import PlainTextResponse

from lesson_planner.config import settings
from lesson_planner.controller import LessonPlanController
from lesson_planner.errors import InvalidStateError
from lesson_planner.formatting.render import RenderedPlan, render_plan
from lesson_planner.llm.generator_factory import get_generator
from lesson_planner.schemas.api import FormOptions, PlanStateResponse
from lesson_planner.schemas.request import LessonRequest
from lesson_planner.utils.constants import (
    DEFAULT_DURATION,
    DEFAULT_GRADE_LEVEL,
    DEFAULT_SUBJECT,
    DURATIONS,
    GRADE_LEVELS,
)

logger = logging.getLogger("uvicorn.error")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # A missing credential raises ConfigurationError here and aborts startup.
    app.state.controller = LessonPlanController(
        get_generator(),
        focus_delay_seconds=settings.results_focus_delay_seconds,
    )
    logger.info("Lesson plan generator ready (provider=%s)", settings.llm_provider)
    yield


app = FastAPI(title="Lesson Plan AI", version="0.1.0", lifespan=lifespan)


def _controller(request: Request) -> LessonPlanController:
    return request.app.state.controller


@app.get("/health")
async def health():
    return {"ok": True}


@app.get("/form-options", response_model=FormOptions)
async def form_options():
    return FormOptions(
        grade_levels=list(GRADE_LEVELS),
        durations=list(DURATIONS),
        defaults={
            "subject": DEFAULT_SUBJECT,
            "gradeLevel": DEFAULT_GRADE_LEVEL,
            "duration": DEFAULT_DURATION,
        },
    )


@app.post("/lesson-plan", response_model=PlanStateResponse)
async def create_lesson_plan(form: LessonRequest, request: Request):
    """Generate a lesson plan from the submitted form.

    The generation outcome (success or error) is reported in the body; only
    a blank topic (422) or an in-flight generation (409) are rejected.
    """
    controller = _controller(request)
    if not form.is_submittable:
        raise HTTPException(status_code=422, detail="Lesson topic is required")
    if controller.is_loading:
        raise HTTPException(status_code=409, detail="A lesson plan is already being generated")
    await controller.submit(form)
    return PlanStateResponse.from_state(controller.state)


@app.get("/lesson-plan", response_model=PlanStateResponse)
async def get_lesson_plan(request: Request):
    return PlanStateResponse.from_state(_controller(request).state)


@app.delete("/lesson-plan", response_model=PlanStateResponse)
async def reset_lesson_plan(request: Request):
    controller = _controller(request)
    controller.reset()
    return PlanStateResponse.from_state(controller.state)


@app.get("/lesson-plan/view", response_model=RenderedPlan)
async def view_lesson_plan(request: Request):
    plan = _controller(request).plan
    if plan is None:
        raise HTTPException(status_code=409, detail="No lesson plan has been generated")
    return render_plan(plan)


@app.get("/lesson-plan/export", response_class=PlainTextResponse)
async def export_lesson_plan(request: Request):
    try:
        exported = _controller(request).save()
    except InvalidStateError as exc:
        raise HTTPException(status_code=409, detail=exc.message) from exc
    return PlainTextResponse(
        exported.content,
        headers={"Content-Disposition": f"attachment; filename*=UTF-8''{quote(exported.filename)}"},
    )


@app.post("/lesson-plan/print", response_class=PlainTextResponse)
async def print_lesson_plan(request: Request):
    try:
        document = _controller(request).print_plan()
    except InvalidStateError as exc:
        raise HTTPException(status_code=409, detail=exc.message) from exc
    return PlainTextResponse(document)
