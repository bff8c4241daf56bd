"""
Quiz grading: strict equality between the submitted answer and the stored correctAnswer, joined by question id.
score = round(correct / total * 100) with half-up rounding; a quiz with no questions scores 0.
"""
import json
import math
from typing import Any, NamedTuple


class QuestionResult(NamedTuple):
    question_id: str | None
    user_answer: Any
    correct_answer: Any
    is_correct: bool
    explanation: str


class GradeResult(NamedTuple):
    score: int
    total_questions: int
    correct_count: int
    detailed_results: list[QuestionResult]


def percent_score(correct: int, total: int) -> int:
    """Half-up rounding (2.5 → 3), unlike Python's banker's round()."""
    if total <= 0:
        return 0
    return int(math.floor(correct / total * 100 + 0.5))


def _id_key(value: Any) -> str | None:
    """Submitted answers are keyed by JSON object keys, which are always strings."""
    return None if value is None else str(value)


def _strict_equal(a: Any, b: Any) -> bool:
    """JSON strict equality: no bool/number coercion, containers never match."""
    if isinstance(a, (dict, list)) or isinstance(b, (dict, list)):
        return False
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    if isinstance(a, (int, float)) and isinstance(b, (int, float)):
        return a == b
    return type(a) is type(b) and a == b


def grade(questions: list[dict], answer_key: list[dict], user_answers: dict, fill_missing: Any = None) -> GradeResult:
    """
    Grade user_answers ({question_id: answer}) against answer_key.
    Unanswered questions are incorrect. fill_missing replaces absent user/correct answers in the output.
    """
    key_by_id = {_id_key(a.get("id")): a for a in answer_key if isinstance(a, dict)}
    results = []
    for q in questions:
        qid = _id_key(q.get("id"))
        key = key_by_id.get(qid) or {}
        correct_answer = key.get("correctAnswer")
        answered = qid in user_answers
        user_answer = user_answers.get(qid)
        is_correct = answered and correct_answer is not None and _strict_equal(user_answer, correct_answer)
        results.append(QuestionResult(
            question_id=qid,
            user_answer=user_answer if user_answer is not None else fill_missing,
            correct_answer=correct_answer if correct_answer is not None else fill_missing,
            is_correct=is_correct,
            explanation=key.get("explanation") or "",
        ))
    correct_count = sum(1 for r in results if r.is_correct)
    total = len(questions)
    return GradeResult(
        score=percent_score(correct_count, total),
        total_questions=total,
        correct_count=correct_count,
        detailed_results=results,
    )


def load_json(raw: str | None, default):
    """Parse a stored JSON column; empty means default."""
    if not raw:
        return default
    return json.loads(raw)
