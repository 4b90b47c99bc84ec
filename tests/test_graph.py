from basics.graph import app, run_lesson, summarise, validate_input
from basics.max_finder import Absent, Present


def test_lesson_request_runs_lesson():
    response = app.invoke({"lesson": "pointers"})
    assert response["lines"] == ["The value of x is: 10", "The value of x is: 20"]
    assert response["summary"] == "Lesson pointers printed 2 line(s)."
    assert not response.get("errors")


def test_numbers_request_computes_maximum():
    response = app.invoke({"numbers": ["3", 5, 2, 1, 4]})
    assert response["numbers"] == [3, 5, 2, 1, 4]
    assert response["result"] == Present(5)
    assert response["lines"] == ["The maximum value is: 5"]
    assert response["summary"] == "Maximum of 5 number(s) is 5."


def test_empty_numbers_yield_absent():
    response = app.invoke({"numbers": []})
    assert response["result"] == Absent()
    assert response["lines"] == ["The sequence is empty"]
    assert response["summary"] == "No maximum: the sequence is empty."


def test_unknown_lesson_halts_before_running():
    response = app.invoke({"lesson": "closures"})
    assert "lines" not in response
    assert response["summary"].startswith("Lesson closures failed: Unknown lesson 'closures'")
    assert response["logs"][-1].startswith("Summary generated:")


def test_missing_payload_is_reported():
    response = app.invoke({"summary": ""})
    assert response["errors"] == ["Missing 'lesson' or 'numbers' in request payload."]
    assert response["summary"].startswith("Request failed:")


def test_invalid_numbers_are_reported():
    state = validate_input({"numbers": [1, "x", True]})
    assert state["errors"] == ["Invalid numbers: element 1: expected an integer, got 'x'"]


def test_multiple_errors_are_counted_in_summary():
    state = validate_input({"lesson": "nope", "numbers": ["bad"]})
    summary = summarise(state)["summary"]
    assert summary.endswith("(+1 more issue(s))")


def test_nodes_do_not_mutate_input_state():
    original = {"lesson": "structs"}
    validated = validate_input(original)
    ran = run_lesson(validated)
    assert original == {"lesson": "structs"}
    assert "lines" not in validated
    assert ran["lines"] == ["Name: John Doe, Age: 30"]
