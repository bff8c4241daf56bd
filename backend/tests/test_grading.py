"""Grading: strict equality by question id, half-up percent score."""
from beyondchats.services.grading import grade, load_json, percent_score

QUESTIONS = [{"id": "q1", "question": "?"}, {"id": "q2", "question": "?"}]
KEY = [
    {"id": "q1", "correctAnswer": "C", "explanation": "one"},
    {"id": "q2", "correctAnswer": "C", "explanation": "two"},
]


def test_half_correct_scores_50():
    result = grade(QUESTIONS, KEY, {"q1": "A", "q2": "C"})
    assert result.score == 50
    assert result.correct_count == 1
    assert result.total_questions == 2
    assert [r.is_correct for r in result.detailed_results] == [False, True]
    assert result.detailed_results[0].correct_answer == "C"
    assert result.detailed_results[0].explanation == "one"


def test_percent_score_rounds_half_up():
    assert percent_score(1, 3) == 33
    assert percent_score(2, 3) == 67
    assert percent_score(1, 8) == 13  # 12.5
    assert percent_score(5, 8) == 63  # 62.5
    assert percent_score(0, 0) == 0


def test_unanswered_is_incorrect():
    result = grade(QUESTIONS, KEY, {"q2": "C"})
    assert result.correct_count == 1
    assert result.detailed_results[0].user_answer is None
    assert result.detailed_results[0].is_correct is False


def test_comparison_is_strict():
    result = grade(QUESTIONS, KEY, {"q1": "c", "q2": " C"})
    assert result.score == 0


def test_comparison_does_not_coerce_types():
    questions = [{"id": "q1"}, {"id": "q2"}, {"id": "q3"}, {"id": "q4"}]
    key = [
        {"id": "q1", "correctAnswer": 1},
        {"id": "q2", "correctAnswer": True},
        {"id": "q3", "correctAnswer": "1"},
        {"id": "q4", "correctAnswer": 2},
    ]
    result = grade(questions, key, {"q1": True, "q2": 1, "q3": 1, "q4": 2.0})
    assert [r.is_correct for r in result.detailed_results] == [False, False, False, True]
    assert result.score == 25


def test_numeric_ids_match_string_answer_keys():
    questions = [{"id": 1}, {"id": 2}]
    key = [{"id": 1, "correctAnswer": "A"}, {"id": 2, "correctAnswer": "C"}]
    result = grade(questions, key, {"1": "A", "2": "B"})
    assert result.score == 50
    assert [r.question_id for r in result.detailed_results] == ["1", "2"]


def test_fill_missing_for_results_view():
    result = grade(QUESTIONS, [KEY[0]], {"q1": "C"}, fill_missing="")
    q2 = result.detailed_results[1]
    assert q2.user_answer == ""
    assert q2.correct_answer == ""
    assert q2.explanation == ""
    assert q2.is_correct is False


def test_zero_questions_scores_zero():
    result = grade([], [], {"q1": "A"})
    assert (result.score, result.total_questions, result.correct_count) == (0, 0, 0)


def test_load_json_default():
    assert load_json(None, []) == []
    assert load_json("", {}) == {}
    assert load_json('{"q1": "A"}', {}) == {"q1": "A"}
