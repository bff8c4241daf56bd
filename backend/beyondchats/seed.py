"""
Demo data: the demo user, two sample PDFs with chunks, a quiz with two attempts, a chat and a progress row.
Idempotent: rows are keyed by fixed ids and only inserted when missing.
"""
import json
import logging
import uuid
from datetime import timedelta

from sqlalchemy.orm import Session

from beyondchats.database import ensure_demo_user
from beyondchats.models.chat import Chat, ChatMessage, ROLE_ASSISTANT, ROLE_USER
from beyondchats.models.pdf import PDF, PDFChunk
from beyondchats.models.progress import Progress
from beyondchats.models.quiz import Quiz, QuizAttempt
from beyondchats.models.types import utcnow
from beyondchats.services.prompts import WELCOME_WITH_PDF

logger = logging.getLogger(__name__)

PDF_PHYSICS_CH1 = uuid.UUID("10000000-0000-4000-8000-000000000001")
PDF_PHYSICS_CH2 = uuid.UUID("10000000-0000-4000-8000-000000000002")
QUIZ_FUNDAMENTALS = uuid.UUID("20000000-0000-4000-8000-000000000001")
CHAT_PHYSICS = uuid.UUID("30000000-0000-4000-8000-000000000001")
PROGRESS_PHYSICS = uuid.UUID("40000000-0000-4000-8000-000000000001")

_QUESTIONS = [
    {
        "id": "q1",
        "question": "What is physics the study of?",
        "options": {
            "A": "Only matter",
            "B": "Only energy",
            "C": "Matter, energy, and their interactions",
            "D": "Only natural phenomena",
        },
        "correctAnswer": "C",
        "explanation": "Physics is the study of matter, energy, and their interactions.",
        "difficulty": "Easy",
    },
    {
        "id": "q2",
        "question": 'What does the Greek word "physis" mean?',
        "options": {"A": "Energy", "B": "Matter", "C": "Nature", "D": "Science"},
        "correctAnswer": "C",
        "explanation": 'The word "physics" comes from the Greek word "physis" meaning nature.',
        "difficulty": "Easy",
    },
]


def _sid(prefix: int, n: int) -> uuid.UUID:
    return uuid.UUID(f"{prefix}0000000-0000-4000-8000-{n:012d}")


def _insert_missing(db: Session, model, rows: list[dict]) -> int:
    added = 0
    for row in rows:
        if db.get(model, row["id"]) is None:
            db.add(model(**row))
            added += 1
    return added


def seed_database(db: Session) -> dict[str, int]:
    """Insert any missing demo rows. Returns the number of rows added per table."""
    user = ensure_demo_user(db)
    now = utcnow()
    added = {}

    added["pdfs"] = _insert_missing(db, PDF, [
        {
            "id": PDF_PHYSICS_CH1,
            "title": "NCERT Class XI Physics - Chapter 1: Physical World",
            "filename": "ncert_physics_ch1.pdf",
            "file_path": "./uploads/sample_physics_ch1.pdf",
            "file_size": 2048576,
            "user_id": user.id,
        },
        {
            "id": PDF_PHYSICS_CH2,
            "title": "NCERT Class XI Physics - Chapter 2: Units and Measurements",
            "filename": "ncert_physics_ch2.pdf",
            "file_path": "./uploads/sample_physics_ch2.pdf",
            "file_size": 1536000,
            "user_id": user.id,
        },
    ])
    db.flush()

    added["pdf_chunks"] = _insert_missing(db, PDFChunk, [
        {
            "id": _sid(5, 1),
            "pdf_id": PDF_PHYSICS_CH1,
            "page_number": 1,
            "content": (
                "Physics is the study of matter, energy, and their interactions. It is a fundamental science "
                "that helps us understand the natural world around us. The word \"physics\" comes from the "
                "Greek word \"physis\" meaning nature."
            ),
        },
        {
            "id": _sid(5, 2),
            "pdf_id": PDF_PHYSICS_CH1,
            "page_number": 2,
            "content": (
                "The scientific method is a systematic approach to understanding natural phenomena. It involves "
                "observation, hypothesis formation, experimentation, and analysis of results. This method has "
                "led to many important discoveries in physics."
            ),
        },
        {
            "id": _sid(5, 3),
            "pdf_id": PDF_PHYSICS_CH2,
            "page_number": 1,
            "content": (
                "Measurement is the process of comparing an unknown quantity with a known standard. In physics, "
                "we need precise measurements to understand natural phenomena. The International System of "
                "Units (SI) provides standard units for measurement."
            ),
        },
    ])

    added["quizzes"] = _insert_missing(db, Quiz, [
        {
            "id": QUIZ_FUNDAMENTALS,
            "title": "Physics Fundamentals Quiz",
            "type": "MCQ",
            "questions": json.dumps(_QUESTIONS),
            "answers": json.dumps([
                {"id": q["id"], "correctAnswer": q["correctAnswer"], "explanation": q["explanation"]}
                for q in _QUESTIONS
            ]),
            "user_id": user.id,
            "pdf_id": PDF_PHYSICS_CH1,
        },
    ])
    db.flush()

    added["quiz_attempts"] = _insert_missing(db, QuizAttempt, [
        {
            "id": _sid(6, 1),
            "quiz_id": QUIZ_FUNDAMENTALS,
            "user_id": user.id,
            "user_answers": json.dumps({"q1": "C", "q2": "C"}),
            "score": 100,
            "total_questions": 2,
            "completed_at": now - timedelta(days=1),
        },
        {
            "id": _sid(6, 2),
            "quiz_id": QUIZ_FUNDAMENTALS,
            "user_id": user.id,
            "user_answers": json.dumps({"q1": "A", "q2": "C"}),
            "score": 50,
            "total_questions": 2,
            "completed_at": now - timedelta(hours=1),
        },
    ])

    added["chats"] = _insert_missing(db, Chat, [
        {"id": CHAT_PHYSICS, "title": "Physics Discussion", "user_id": user.id, "pdf_id": PDF_PHYSICS_CH1},
    ])
    db.flush()

    added["chat_messages"] = _insert_missing(db, ChatMessage, [
        {
            "id": _sid(7, 1),
            "chat_id": CHAT_PHYSICS,
            "role": ROLE_ASSISTANT,
            "content": WELCOME_WITH_PDF,
            "created_at": now - timedelta(minutes=3),
        },
        {
            "id": _sid(7, 2),
            "chat_id": CHAT_PHYSICS,
            "role": ROLE_USER,
            "content": "What is physics?",
            "created_at": now - timedelta(minutes=2),
        },
        {
            "id": _sid(7, 3),
            "chat_id": CHAT_PHYSICS,
            "role": ROLE_ASSISTANT,
            "content": (
                'According to page 1: "Physics is the study of matter, energy, and their interactions." '
                "Physics is a fundamental science that helps us understand the natural world around us. "
                "The word \"physics\" comes from the Greek word \"physis\" meaning nature."
            ),
            "created_at": now - timedelta(minutes=1),
        },
    ])

    added["progress"] = _insert_missing(db, Progress, [
        {
            "id": PROGRESS_PHYSICS,
            "subject": "Physics",
            "total_quizzes": 1,
            "completed_quizzes": 2,
            "average_score": 75.0,
            "strengths": json.dumps(["Physics Fundamentals", "Basic Concepts"]),
            "weaknesses": json.dumps(["Advanced Mechanics"]),
            "user_id": user.id,
        },
    ])

    db.commit()
    logger.info("Seed complete: %s", ", ".join(f"{k}={v}" for k, v in added.items()))
    return added
