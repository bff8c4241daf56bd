"""
Progress dashboard: live counts from quizzes and attempts, strengths/weaknesses from stored Progress rows.
"""
import json
import uuid

from sqlalchemy.orm import Session

from beyondchats.config import settings
from beyondchats.models.progress import Progress
from beyondchats.models.quiz import Quiz, QuizAttempt


def _merge_lists(raw_lists: list[str]) -> list[str]:
    """Union of JSON string lists, first occurrence order."""
    seen: dict[str, None] = {}
    for raw in raw_lists:
        for item in json.loads(raw or "[]"):
            seen.setdefault(item, None)
    return list(seen)


def compute_progress(db: Session, user_id: uuid.UUID) -> dict:
    attempts = (
        db.query(QuizAttempt)
        .filter(QuizAttempt.user_id == user_id)
        .order_by(QuizAttempt.completed_at.desc())
        .all()
    )
    total_quizzes = db.query(Quiz).filter(Quiz.user_id == user_id).count()
    completed = len(attempts)
    average = sum(a.score for a in attempts) / completed if completed else 0
    rows = db.query(Progress).filter(Progress.user_id == user_id).order_by(Progress.subject).all()
    return {
        "total_quizzes": total_quizzes,
        "completed_quizzes": completed,
        "average_score": average,
        "total_study_time": completed * settings.minutes_per_attempt,
        "strengths": _merge_lists([r.strengths for r in rows]),
        "weaknesses": _merge_lists([r.weaknesses for r in rows]),
        "recent_activity": [
            {
                "id": str(a.id),
                "type": "quiz",
                "title": a.quiz.title,
                "score": a.score,
                "timestamp": a.completed_at,
            }
            for a in attempts[: settings.recent_activity_limit]
        ],
    }
