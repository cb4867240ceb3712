"""Tests for the render and export projections."""

from lesson_planner.formatting.export import export_filename, export_plan_text
from lesson_planner.formatting.render import (
    ListSection,
    StrategySection,
    TimelineSection,
    render_plan,
    render_view_text,
)
from lesson_planner.schemas.lesson import Activity


def _underlined(title: str) -> str:
    return f"{title}\n{'=' * len(title)}"


def test_export_matches_download_format(lesson_plan):
    expected = "\n".join(
        [
            "WATER CYCLE BASICS",
            "=" * 40,
            "",
            "Subject: Science",
            "Grade Level: Grades 3-5",
            "Duration: 45 minutes",
            "",
            _underlined("Learning Objectives"),
            "- Describe evaporation",
            "- Explain condensation",
            "- Identify forms of precipitation",
            "",
            "",
            _underlined("Materials Needed"),
            "- Clear cup",
            "- Ice cubes",
            "",
            "",
            _underlined("Lesson Activities"),
            "- Introduction (5 mins): Ask where rain comes from.",
            "- Guided Practice (25 mins): Model the cycle in a cup.",
            "- Conclusion (15 mins): Exit ticket.",
            "",
            "",
            _underlined("Assessment & Evaluation"),
            "Formative checks throughout.",
            "- Class discussion",
            "- Exit ticket questions",
            "",
            "",
            _underlined("Differentiation & Accommodations"),
            "Support for diverse learners.",
            "- Sentence starters",
            "- Extension diagram",
        ]
    )
    assert export_plan_text(lesson_plan) == expected


def test_export_is_idempotent(lesson_plan):
    assert export_plan_text(lesson_plan) == export_plan_text(lesson_plan)


def test_export_keeps_empty_materials_section(lesson_plan):
    plan = lesson_plan.model_copy(update={"materials": []})
    assert f"{_underlined('Materials Needed')}\n\n\n\n{_underlined('Lesson Activities')}" in export_plan_text(plan)


def test_export_and_render_preserve_activity_order(lesson_plan):
    activities = [
        Activity(step="Zeta", description="first", time=10),
        Activity(step="Alpha", description="second", time=10),
        Activity(step="Mu", description="third", time=10),
    ]
    plan = lesson_plan.model_copy(update={"activities": activities})

    text = export_plan_text(plan)
    assert text.index("- Zeta") < text.index("- Alpha") < text.index("- Mu")

    timeline = render_plan(plan).sections[2]
    assert [entry.step for entry in timeline.entries] == ["Zeta", "Alpha", "Mu"]


def test_export_filename_slugifies_title():
    assert export_filename("Water Cycle Basics") == "water_cycle_basics_lesson_plan.txt"
    assert export_filename("Plants  &\tPollinators") == "plants_&_pollinators_lesson_plan.txt"


def test_render_plan_sections_have_fixed_labels_and_icons(lesson_plan):
    view = render_plan(lesson_plan)

    assert view.header.title == "Water Cycle Basics"
    assert (view.header.subject.icon, view.header.subject.text) == ("award", "Science")
    assert view.header.grade_level.text == "Grades 3-5"
    assert view.header.duration.icon == "clock"
    assert [(s.key, s.label, s.icon) for s in view.sections] == [
        ("objectives", "Learning Objectives", "target"),
        ("materials", "Materials & Resources", "beaker"),
        ("activities", "Lesson Activities", "book"),
        ("assessment", "Assessment", "check-square"),
        ("differentiation", "Differentiation", "list-checks"),
    ]
    assert [type(s) for s in view.sections] == [
        ListSection,
        ListSection,
        TimelineSection,
        StrategySection,
        StrategySection,
    ]
    assert view.sections[3].description == "Formative checks throughout."


def test_render_plan_is_deterministic(lesson_plan):
    assert render_plan(lesson_plan) == render_plan(lesson_plan)


def test_render_view_text_lists_timeline_with_minutes(lesson_plan):
    text = render_view_text(render_plan(lesson_plan))

    assert text.startswith("Water Cycle Basics\nScience | Grades 3-5 | 45 minutes\n")
    assert "1. Introduction (5 minutes)\n   Ask where rain comes from." in text
    assert "3. Conclusion (15 minutes)" in text
    assert "  • Sentence starters" in text
