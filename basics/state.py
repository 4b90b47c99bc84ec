from __future__ import annotations

from typing import TypedDict

from .max_finder import MaxResult


class LessonState(TypedDict, total=False):
    """State container for the lesson workflow."""

    lesson: str
    numbers: list[object]
    lines: list[str]
    result: MaxResult
    errors: list[str]
    logs: list[str]
    summary: str
