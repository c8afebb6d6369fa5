import pytest

from grading import GradeStatus, grade, split_answers


def test_split_answers_trims_and_drops_empty():
    assert split_answers("a, b ,,c") == ["a", "b", "c"]
    assert split_answers("  ,  , ") == []
    assert split_answers("") == []
    assert split_answers(None) == []


def test_split_answers_keeps_order():
    assert split_answers("z,y,x") == ["z", "y", "x"]


@pytest.mark.parametrize(
    "submitted,expected",
    [
        ("4", GradeStatus.PARTIAL),
        ("4, four", GradeStatus.CORRECT),
        ("FOUR,4", GradeStatus.CORRECT),
        ("4,4", GradeStatus.PARTIAL),
        ("4, FOUR, five", GradeStatus.PARTIAL),
        ("five", GradeStatus.INCORRECT),
        ("", GradeStatus.INCORRECT),
        ("   ", GradeStatus.INCORRECT),
    ],
)
def test_grade_two_answer_question(submitted, expected):
    assert grade(submitted, ["4", "four"]).status is expected


def test_single_answer_exact_match_is_correct():
    assert grade("4", ["4"]).status is GradeStatus.CORRECT


def test_comparison_is_case_insensitive():
    assert grade("paris", ["Paris"]).status is GradeStatus.CORRECT


def test_case_duplicate_does_not_fill_two_slots():
    g = grade("Four, four", ["4", "four"])
    assert g.status is GradeStatus.PARTIAL
    assert g.results == [("Four", True), ("four", True)]


def test_per_answer_flags_independent_of_status():
    g = grade("red, purple", ["red", "green", "blue"])
    assert g.status is GradeStatus.PARTIAL
    assert g.results == [("red", True), ("purple", False)]
    assert g.score == 1 and g.total == 3


def test_no_whitespace_normalization_inside_answer():
    assert grade("new  york", ["new york"]).status is GradeStatus.INCORRECT


def test_empty_accepted_answers_never_correct():
    assert grade("", []).status is GradeStatus.INCORRECT
    assert grade("x", []).status is GradeStatus.INCORRECT


def test_status_values_are_display_strings():
    assert GradeStatus.CORRECT.value == "Correct"
    assert GradeStatus.PARTIAL.value == "Partially Correct"
    assert GradeStatus.INCORRECT.value == "Incorrect"


def test_case_variant_accepted_answers_count_once():
    assert grade("paris", ["Paris", "paris"]).status is GradeStatus.CORRECT
    # the submission itself repeats an answer
    assert grade("paris, Paris", ["Paris", "paris"]).status is GradeStatus.PARTIAL


def test_lowercase_folding_only():
    # no full Unicode case folding: "ß" does not become "ss"
    assert grade("straße", ["STRASSE"]).status is GradeStatus.INCORRECT
    assert grade("STRASSE", ["strasse"]).status is GradeStatus.CORRECT
