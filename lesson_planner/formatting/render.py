"""On-screen projection of a lesson plan: header plus labelled section cards."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from lesson_planner.schemas.lesson import Assessment, LessonPlan


class _ViewModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class HeaderField(_ViewModel):
    icon: str
    text: str


class PlanHeader(_ViewModel):
    title: str
    subject: HeaderField
    grade_level: HeaderField
    duration: HeaderField


class ListSection(_ViewModel):
    kind: Literal["list"] = "list"
    key: str
    label: str
    icon: str
    items: list[str]


class TimelineEntry(_ViewModel):
    step: str
    minutes: int
    description: str


class TimelineSection(_ViewModel):
    kind: Literal["timeline"] = "timeline"
    key: str
    label: str
    icon: str
    entries: list[TimelineEntry]


class StrategySection(_ViewModel):
    kind: Literal["strategy"] = "strategy"
    key: str
    label: str
    icon: str
    description: str
    items: list[str]


Section = Annotated[
    ListSection | TimelineSection | StrategySection,
    Field(discriminator="kind"),
]


class RenderedPlan(_ViewModel):
    header: PlanHeader
    sections: list[Section]


def _strategy(key: str, label: str, icon: str, strategy: Assessment) -> StrategySection:
    return StrategySection(
        key=key,
        label=label,
        icon=icon,
        description=strategy.description,
        items=list(strategy.items),
    )


def render_plan(plan: LessonPlan) -> RenderedPlan:
    """Project ``plan`` into the header and the five ordered section cards."""
    header = PlanHeader(
        title=plan.title,
        subject=HeaderField(icon="award", text=plan.subject),
        grade_level=HeaderField(icon="users", text=plan.grade_level),
        duration=HeaderField(icon="clock", text=plan.duration),
    )
    sections = [
        ListSection(
            key="objectives",
            label="Learning Objectives",
            icon="target",
            items=list(plan.objectives),
        ),
        ListSection(
            key="materials",
            label="Materials & Resources",
            icon="beaker",
            items=list(plan.materials),
        ),
        TimelineSection(
            key="activities",
            label="Lesson Activities",
            icon="book",
            entries=[
                TimelineEntry(step=a.step, minutes=a.time, description=a.description)
                for a in plan.activities
            ],
        ),
        _strategy("assessment", "Assessment", "check-square", plan.assessment),
        _strategy("differentiation", "Differentiation", "list-checks", plan.differentiation),
    ]
    return RenderedPlan(header=header, sections=sections)


def render_view_text(view: RenderedPlan) -> str:
    """Lay out a rendered plan as printable plain text."""
    header = view.header
    lines = [
        header.title,
        f"{header.subject.text} | {header.grade_level.text} | {header.duration.text}",
    ]
    for section in view.sections:
        lines.append("")
        lines.append(section.label)
        lines.append("-" * len(section.label))
        if isinstance(section, TimelineSection):
            for idx, entry in enumerate(section.entries, start=1):
                lines.append(f"{idx}. {entry.step} ({entry.minutes} minutes)")
                lines.append(f"   {entry.description}")
        elif isinstance(section, StrategySection):
            lines.append(section.description)
            lines.extend(f"  • {item}" for item in section.items)
        else:
            lines.extend(f"  • {item}" for item in section.items)
    return "\n".join(lines) + "\n"
