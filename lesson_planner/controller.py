"""Application controller: owns the single lesson plan result and its lifecycle."""

from __future__ import annotations

import asyncio
import itertools
import logging
from dataclasses import dataclass
from typing import Callable

from lesson_planner.agents.lesson_plan_agent import generate_lesson_plan
from lesson_planner.errors import InvalidStateError, LessonPlanError
from lesson_planner.formatting.export import export_filename, export_plan_text
from lesson_planner.formatting.render import render_plan, render_view_text
from lesson_planner.graph.builder import build_graph
from lesson_planner.llm.base import PlanGenerator
from lesson_planner.models.state import (
    ControllerState,
    Failure,
    Idle,
    Loading,
    Success,
)
from lesson_planner.schemas.lesson import LessonPlan
from lesson_planner.schemas.request import LessonRequest

logger = logging.getLogger(__name__)

UNKNOWN_ERROR_MESSAGE = "An unknown error occurred."


def known_error_message(exc: LessonPlanError) -> str:
    return (
        f"Failed to generate lesson plan: {exc.message.rstrip('.')}. "
        "Please check your API key and try again."
    )


@dataclass(frozen=True)
class ExportedPlan:
    filename: str
    content: str


class LessonPlanController:
    """Idle → Loading → Success | Failure, one plan at a time.

    Each submission gets a new request id; a result whose id no longer
    matches the current ``Loading`` state is dropped.
    """

    def __init__(
        self,
        generator: PlanGenerator,
        on_results_focus: Callable[[], None] | None = None,
        focus_delay_seconds: float = 0.1,
        graph=None,
    ) -> None:
        self._generator = generator
        self._graph = graph if graph is not None else build_graph(generator)
        self._on_results_focus = on_results_focus
        self._focus_delay_seconds = focus_delay_seconds
        self._request_ids = itertools.count(1)
        self._state: ControllerState = Idle()
        self._focus_handle: asyncio.TimerHandle | None = None

    @property
    def state(self) -> ControllerState:
        return self._state

    @property
    def is_loading(self) -> bool:
        return isinstance(self._state, Loading)

    @property
    def plan(self) -> LessonPlan | None:
        if isinstance(self._state, Success):
            return self._state.plan
        return None

    @property
    def error(self) -> str | None:
        if isinstance(self._state, Failure):
            return self._state.message
        return None

    async def submit(self, request: LessonRequest) -> bool:
        """Generate a plan for ``request``.

        Returns ``False`` without calling the generator when the topic is
        blank; otherwise ``True`` once the request has settled (or been
        superseded).
        """
        if not request.is_submittable:
            logger.info("Ignoring submission with an empty topic")
            return False

        request_id = next(self._request_ids)
        self._state = Loading(request_id=request_id)
        logger.info("Request %s: generating plan for topic %r", request_id, request.topic)
        self._schedule_results_focus()

        try:
            plan = await generate_lesson_plan(request, self._generator, graph=self._graph)
        except LessonPlanError as exc:
            self._settle(request_id, Failure(request_id=request_id, message=known_error_message(exc)))
        except Exception:
            logger.exception("Request %s: unexpected error during generation", request_id)
            self._settle(request_id, Failure(request_id=request_id, message=UNKNOWN_ERROR_MESSAGE))
        else:
            self._settle(request_id, Success(request_id=request_id, plan=plan))
        return True

    def reset(self) -> None:
        """Return to Idle; an outstanding response will be discarded."""
        self._cancel_results_focus()
        self._state = Idle()

    def save(self) -> ExportedPlan:
        plan = self._require_plan("save")
        return ExportedPlan(filename=export_filename(plan.title), content=export_plan_text(plan))

    def print_plan(self, printer: Callable[[str], None] | None = None) -> str:
        """Lay out the rendered plan for printing and hand it to ``printer``."""
        plan = self._require_plan("print")
        document = render_view_text(render_plan(plan))
        if printer is not None:
            printer(document)
        return document

    def _settle(self, request_id: int, new_state: Success | Failure) -> None:
        current = self._state
        if not isinstance(current, Loading) or current.request_id != request_id:
            logger.warning("Request %s: discarding stale %s result", request_id, new_state.status)
            return
        self._state = new_state
        logger.info("Request %s: %s", request_id, new_state.status)

    def _require_plan(self, action: str) -> LessonPlan:
        plan = self.plan
        if plan is None:
            raise InvalidStateError(f"Cannot {action}: no lesson plan has been generated.")
        return plan

    def _schedule_results_focus(self) -> None:
        # Only the latest request may move focus to the results.
        self._cancel_results_focus()
        if self._on_results_focus is None:
            return
        loop = asyncio.get_running_loop()
        self._focus_handle = loop.call_later(self._focus_delay_seconds, self._on_results_focus)

    def _cancel_results_focus(self) -> None:
        if self._focus_handle is not None:
            self._focus_handle.cancel()
            self._focus_handle = None
