from typing import Any

from langchain_core.tools import tool

from . import lessons  # noqa: F401  (registers the lessons)
from .max_finder import describe_max, find_max
from .registry import UnknownLessonError, get_registry
from .validators import parse_int_sequence


@tool("find_max")
def find_max_tool(numbers: list[Any]) -> str:
    """Return the maximum of a list of integers, or report that the list is empty."""
    try:
        values = parse_int_sequence(numbers)
    except ValueError as exc:
        return f"Error: {exc}"
    return describe_max(find_max(values))


@tool("list_lessons")
def list_lessons() -> str:
    """List the available lessons with a one-line summary each."""
    return "\n".join(f"{lesson.name}: {lesson.summary}" for lesson in get_registry().lessons())


@tool("run_lesson")
def run_lesson_tool(name: str) -> str:
    """Run a lesson by name and return the lines it prints."""
    try:
        return "\n".join(get_registry().run(name.strip()))
    except UnknownLessonError as exc:
        return f"Error: {exc}"


TOOLS = [find_max_tool, list_lessons, run_lesson_tool]
