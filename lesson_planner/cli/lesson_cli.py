"""Interactive CLI client for the lesson plan service."""

from __future__ import annotations

import argparse
import re
from pathlib import Path
from urllib.parse import unquote

import requests

from lesson_planner.utils.constants import (
    DEFAULT_DURATION,
    DEFAULT_GRADE_LEVEL,
    DEFAULT_SUBJECT,
    DEFAULT_TOPIC,
    DURATIONS,
    GRADE_LEVELS,
)

_FILENAME_RE = re.compile(r"filename\*=UTF-8''([^;]+)")


def _ask(label: str, default: str) -> str:
    value = input(f"{label} [{default}]: ").strip()
    return value or default


def _choose(label: str, options: tuple[str, ...], default: str) -> str:
    print(f"{label}:")
    for idx, option in enumerate(options, start=1):
        marker = "*" if option == default else " "
        print(f" {marker}{idx}. {option}")
    while True:
        raw = input(f"Choose 1-{len(options)} [{options.index(default) + 1}]: ").strip()
        if not raw:
            return default
        if raw.isdigit() and 1 <= int(raw) <= len(options):
            return options[int(raw) - 1]
        print("Please enter one of the listed numbers.")


def read_form() -> dict:
    """Prompt for the four lesson fields; the topic is asked again until non-blank."""
    subject = _ask("Subject", DEFAULT_SUBJECT)
    grade_level = _choose("Grade Level", GRADE_LEVELS, DEFAULT_GRADE_LEVEL)
    duration = _choose("Lesson Duration", DURATIONS, DEFAULT_DURATION)
    topic = _ask("Lesson Topic", DEFAULT_TOPIC)
    while not topic.strip():
        topic = input("Lesson Topic (required): ")
    return {"subject": subject, "gradeLevel": grade_level, "duration": duration, "topic": topic}


def filename_from_response(resp: requests.Response, fallback: str = "lesson_plan.txt") -> str:
    match = _FILENAME_RE.search(resp.headers.get("Content-Disposition", ""))
    if not match:
        return fallback
    # Keep only the final path component of whatever the server suggested.
    return Path(unquote(match.group(1))).name or fallback


def save_plan(base_url: str, timeout: int, out_dir: Path = Path(".")) -> Path | None:
    resp = requests.get(f"{base_url}/lesson-plan/export", timeout=timeout)
    if resp.status_code != 200:
        print(f"Error {resp.status_code}: {resp.text}")
        return None
    path = out_dir / filename_from_response(resp)
    path.write_text(resp.text, encoding="utf-8")
    return path


def print_plan(base_url: str, timeout: int) -> bool:
    resp = requests.post(f"{base_url}/lesson-plan/print", timeout=timeout)
    if resp.status_code != 200:
        print(f"Error {resp.status_code}: {resp.text}")
        return False
    print(resp.text)
    return True


def generate(base_url: str, timeout: int, form: dict) -> bool:
    print("Crafting your lesson plan... This may take a moment.")
    resp = requests.post(f"{base_url}/lesson-plan", json=form, timeout=timeout)
    if resp.status_code != 200:
        print(f"Error {resp.status_code}: {resp.text}")
        return False
    data = resp.json()
    if data.get("status") != "success":
        print(f"An Error Occurred: {data.get('error') or 'unknown error'}")
        return False
    return print_plan(base_url, timeout)


def main() -> int:
    parser = argparse.ArgumentParser(description="Interactive lesson plan CLI")
    parser.add_argument(
        "--url",
        default="http://127.0.0.1:8000",
        help="Lesson plan service base URL",
    )
    parser.add_argument(
        "--timeout",
        type=int,
        default=120,
        help="Request timeout in seconds",
    )
    args = parser.parse_args()
    base_url = args.url.rstrip("/")

    try:
        has_plan = generate(base_url, args.timeout, read_form())
        print("Commands: save, print, new, exit. Ctrl+D to quit.")
        while True:
            command = input("> ").strip().lower()
            if not command:
                continue
            if command in {"exit", "quit"}:
                break
            if command == "new":
                has_plan = generate(base_url, args.timeout, read_form())
            elif command in {"save", "print"} and not has_plan:
                print("Generate a lesson plan first (type 'new').")
            elif command == "save":
                path = save_plan(base_url, args.timeout)
                if path is not None:
                    print(f"Saved {path}")
            elif command == "print":
                print_plan(base_url, args.timeout)
            else:
                print("Unknown command. Use save, print, new or exit.")
    except EOFError:
        print()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
