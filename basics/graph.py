from __future__ import annotations

from langgraph.graph import START, END, StateGraph

from . import lessons  # noqa: F401  (registers the lessons)
from .logger import log_message
from .max_finder import Present, describe_max, find_max
from .registry import UnknownLessonError, get_registry
from .state import LessonState
from .validators import parse_int_sequence


# --------------------------------------------------------------------------------------
# Helper utilities
# --------------------------------------------------------------------------------------

def _with_appended_list(state: LessonState, key: str, value: str) -> LessonState:
    items = list(state.get(key, []))
    items.append(value)
    state[key] = items
    return state


def _add_log(state: LessonState, message: str) -> LessonState:
    log_message(message)
    return _with_appended_list(state, "logs", message)


def _add_error(state: LessonState, message: str) -> LessonState:
    _with_appended_list(state, "errors", message)
    return _add_log(state, f"ERROR: {message}")


# --------------------------------------------------------------------------------------
# Graph nodes
# --------------------------------------------------------------------------------------

def validate_input(state: LessonState) -> LessonState:
    new_state: LessonState = dict(state)

    lesson_value = state.get("lesson")
    lesson_name = str(lesson_value).strip() if lesson_value is not None else ""
    has_numbers = "numbers" in state

    if lesson_name:
        try:
            get_registry().get(lesson_name)
        except UnknownLessonError as exc:
            _add_error(new_state, str(exc))
        else:
            new_state["lesson"] = lesson_name
            _add_log(new_state, f"Received lesson request: {lesson_name}")
    elif not has_numbers:
        _add_error(new_state, "Missing 'lesson' or 'numbers' in request payload.")

    if has_numbers:
        try:
            numbers = parse_int_sequence(state.get("numbers"))
        except ValueError as exc:
            _add_error(new_state, f"Invalid numbers: {exc}")
        else:
            new_state["numbers"] = numbers
            _add_log(new_state, f"Received {len(numbers)} number(s).")

    return new_state


def run_lesson(state: LessonState) -> LessonState:
    new_state: LessonState = dict(state)
    lines: list[str] = []

    lesson_name = new_state.get("lesson")
    if lesson_name:
        lines.extend(get_registry().run(lesson_name))
        _add_log(new_state, f"Ran lesson {lesson_name} ({len(lines)} line(s)).")

    if "numbers" in new_state:
        result = find_max(new_state["numbers"])
        new_state["result"] = result
        lines.append(describe_max(result))
        _add_log(new_state, f"Computed maximum: {result!r}")

    new_state["lines"] = lines
    return new_state


def summarise(state: LessonState) -> LessonState:
    new_state: LessonState = dict(state)
    lesson_name = new_state.get("lesson")
    prefix = f"Lesson {lesson_name}" if lesson_name else "Request"

    errors = new_state.get("errors", [])
    if errors:
        summary = f"{prefix} failed: {errors[0]}"
        if len(errors) > 1:
            summary += f" (+{len(errors) - 1} more issue(s))"
    elif "result" in new_state and not lesson_name:
        result = new_state["result"]
        if isinstance(result, Present):
            summary = f"Maximum of {len(new_state['numbers'])} number(s) is {result.value}."
        else:
            summary = "No maximum: the sequence is empty."
    else:
        summary = f"{prefix} printed {len(new_state.get('lines', []))} line(s)."
    new_state["summary"] = summary

    _add_log(new_state, f"Summary generated: {summary}")
    return new_state


# --------------------------------------------------------------------------------------
# Graph assembly
# --------------------------------------------------------------------------------------

def _route_on_errors(state: LessonState) -> str:
    return "halt" if state.get("errors") else "continue"


graph = StateGraph(LessonState)

graph.add_node("validate_input", validate_input)

graph.add_node("run_lesson", run_lesson)

graph.add_node("summarise", summarise)

graph.add_edge(START, "validate_input")

graph.add_conditional_edges(
    "validate_input",
    _route_on_errors,
    {"halt": "summarise", "continue": "run_lesson"},
)

graph.add_edge("run_lesson", "summarise")

graph.add_edge("summarise", END)

app = graph.compile()
