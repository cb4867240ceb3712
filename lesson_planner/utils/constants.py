"""Fixed form choices and export formatting values."""

# Form choices, in display order.
GRADE_LEVELS: tuple[str, ...] = (
    "Kindergarten",
    "Grades 1-2",
    "Grades 3-5",
    "Middle School (Grades 6-8)",
    "High School (Grades 9-12)",
)
DURATIONS: tuple[str, ...] = ("30 minutes", "45 minutes", "60 minutes", "90 minutes")

DEFAULT_SUBJECT = "Science"
DEFAULT_GRADE_LEVEL = "Grades 3-5"
DEFAULT_DURATION = "45 minutes"
DEFAULT_TOPIC = "The Water Cycle"

# The exported document title is always ruled with 40 '=' regardless of its length.
EXPORT_TITLE_RULE = "=" * 40
EXPORT_FILENAME_SUFFIX = "_lesson_plan.txt"
