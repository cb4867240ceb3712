"""Error types shared by the generator, controller and HTTP layers."""

from __future__ import annotations


class LessonPlanError(Exception):
    """Base class for errors that carry a user-presentable message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(LessonPlanError):
    """Raised when a generator cannot be built (missing credential, unknown provider)."""


class GenerationError(LessonPlanError):
    """Raised for any failure while talking to the AI model or reading its reply."""


class InvalidStateError(LessonPlanError):
    """Raised when save/print is requested without a lesson plan."""
