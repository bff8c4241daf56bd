"""
Quiz generation: all chunks of a PDF + the per-type prompt → one completion → parse JSON → persist.
questions and the derived answer key ({id, correctAnswer, explanation}) are stored as JSON strings.
No schema validation or repair: output that does not parse raises QuizGenerationError.
"""
import json
import logging
import uuid

from sqlalchemy.orm import Session

from beyondchats.llm import get_llm_service
from beyondchats.models.pdf import PDF, PDFChunk
from beyondchats.models.quiz import Quiz, QUIZ_TYPES
from beyondchats.services.prompts import QUIZ_PROMPTS, QUIZ_USER_TEMPLATE, format_pdf_context

logger = logging.getLogger(__name__)


class QuizGenerationError(Exception):
    """Model output was not a JSON object with a "questions" list."""


def is_valid_quiz_type(quiz_type: str | None) -> bool:
    return quiz_type in QUIZ_TYPES


def _strip_json_fences(text: str) -> str:
    """Remove a surrounding markdown code fence (```json ... ```)."""
    t = text.strip()
    if t.startswith("```"):
        lines = t.split("\n")
        lines = lines[1:]
        if lines and lines[-1].strip() == "```":
            lines = lines[:-1]
        t = "\n".join(lines)
    return t.strip()


def parse_quiz_response(raw: str) -> list[dict]:
    """
    Parse the model text into a list of question dicts.
    Questions without an id get q1..qN by position so answers can be joined later.
    Ids are stored as strings to match the keys of submitted answers.
    """
    try:
        data = json.loads(_strip_json_fences(raw or ""))
    except json.JSONDecodeError as e:
        logger.error("Failed to parse quiz response: %s", (raw or "")[:500])
        raise QuizGenerationError("Invalid response format from model") from e
    questions = data.get("questions") if isinstance(data, dict) else None
    if not isinstance(questions, list):
        raise QuizGenerationError("Model response has no questions list")
    out = []
    for index, q in enumerate(questions):
        if not isinstance(q, dict):
            raise QuizGenerationError(f"Question {index + 1} is not an object")
        q = {**q, "id": str(q["id"]) if q.get("id") else f"q{index + 1}"}
        out.append(q)
    return out


def build_answer_key(questions: list[dict]) -> list[dict]:
    return [
        {
            "id": q.get("id"),
            "correctAnswer": q.get("correctAnswer"),
            "explanation": q.get("explanation"),
        }
        for q in questions
    ]


def pdf_content(db: Session, pdf_id: uuid.UUID) -> str:
    chunks = (
        db.query(PDFChunk)
        .filter(PDFChunk.pdf_id == pdf_id)
        .order_by(PDFChunk.page_number)
        .all()
    )
    return format_pdf_context(chunks)


def generate_quiz(
    db: Session,
    pdf: PDF,
    quiz_type: str,
    user_id: uuid.UUID,
    content: str,
    title: str | None = None,
) -> tuple[Quiz, list[dict]]:
    """Call the model once with `content` (already checked non-empty) and persist the quiz. Commits."""
    raw = get_llm_service().generate_quiz(
        QUIZ_PROMPTS[quiz_type],
        QUIZ_USER_TEMPLATE.format(quiz_type=quiz_type, content=content),
        quiz_type,
    )
    questions = parse_quiz_response(raw)
    quiz = Quiz(
        title=title or f"{quiz_type} Quiz - {pdf.title}",
        type=quiz_type,
        questions=json.dumps(questions),
        answers=json.dumps(build_answer_key(questions)),
        user_id=user_id,
        pdf_id=pdf.id,
    )
    db.add(quiz)
    db.commit()
    db.refresh(quiz)
    logger.info("generate_quiz: quiz_id=%s type=%s questions=%s", quiz.id, quiz_type, len(questions))
    return quiz, questions
