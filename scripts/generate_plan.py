"""Generate one lesson plan without running the HTTP service.

Usage:
    python scripts/generate_plan.py --topic "The Water Cycle"
    python scripts/generate_plan.py --topic "Counting to 20" --subject Math --print
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from lesson_planner.controller import LessonPlanController
from lesson_planner.errors import ConfigurationError
from lesson_planner.llm.generator_factory import get_generator
from lesson_planner.schemas.request import LessonRequest
from lesson_planner.utils.constants import (
    DEFAULT_DURATION,
    DEFAULT_GRADE_LEVEL,
    DEFAULT_SUBJECT,
    DURATIONS,
    GRADE_LEVELS,
)


def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a lesson plan and save it as text.")
    parser.add_argument("--topic", required=True, help="Lesson topic.")
    parser.add_argument("--subject", default=DEFAULT_SUBJECT)
    parser.add_argument("--grade-level", default=DEFAULT_GRADE_LEVEL, choices=GRADE_LEVELS)
    parser.add_argument("--duration", default=DEFAULT_DURATION, choices=DURATIONS)
    parser.add_argument(
        "--out-dir",
        type=Path,
        default=Path("."),
        help="Directory for the exported .txt file.",
    )
    parser.add_argument(
        "--print",
        dest="print_plan",
        action="store_true",
        help="Also print the formatted plan to stdout.",
    )
    return parser.parse_args(argv)


async def run(args: argparse.Namespace, controller: LessonPlanController) -> int:
    request = LessonRequest(
        subject=args.subject,
        grade_level=args.grade_level,
        duration=args.duration,
        topic=args.topic,
    )
    if request.is_submittable:
        print("Crafting your lesson plan...", file=sys.stderr)
    if not await controller.submit(request):
        print("Lesson topic is required.", file=sys.stderr)
        return 2
    if controller.error:
        print(controller.error, file=sys.stderr)
        return 1

    exported = controller.save()
    args.out_dir.mkdir(parents=True, exist_ok=True)
    # The title is model output; keep only its final path component.
    path = args.out_dir / Path(exported.filename).name
    path.write_text(exported.content, encoding="utf-8")
    if args.print_plan:
        controller.print_plan(printer=print)
    print(f"Saved {path}")
    return 0


def main(argv=None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    args = _parse_args(argv)
    try:
        controller = LessonPlanController(get_generator())
    except ConfigurationError as exc:
        print(exc.message, file=sys.stderr)
        return 1
    return asyncio.run(run(args, controller))


if __name__ == "__main__":
    raise SystemExit(main())
