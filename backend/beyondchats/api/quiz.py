"""
Quiz API: generate from a processed PDF, read, list recent, submit attempts and reconstruct results.
"""
import json
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from beyondchats.config import settings
from beyondchats.database import get_db
from beyondchats.models.pdf import PDF
from beyondchats.models.quiz import Quiz, QuizAttempt
from beyondchats.models.user import User
from beyondchats.schemas.quiz import (
    AttemptResult,
    AttemptSummary,
    DetailedResult,
    GeneratedQuiz,
    PDFTitle,
    QuizAttemptRequest,
    QuizAttemptResponse,
    QuizDetailResponse,
    QuizGenerateRequest,
    QuizGenerateResponse,
    RecentQuizResponse,
)
from beyondchats.api.deps import get_current_user, internal_error, parse_uuid
from beyondchats.services.grading import GradeResult, grade, load_json
from beyondchats.services.quiz_generation import generate_quiz, is_valid_quiz_type, pdf_content

router = APIRouter(prefix="/quiz", tags=["quiz"])
logger = logging.getLogger(__name__)

QUIZ_NOT_FOUND = "Quiz not found"


def _detailed(result: GradeResult) -> list[DetailedResult]:
    return [
        DetailedResult(
            question_id=r.question_id,
            user_answer=r.user_answer,
            correct_answer=r.correct_answer,
            is_correct=r.is_correct,
            explanation=r.explanation,
        )
        for r in result.detailed_results
    ]


def _get_quiz(db: Session, quiz_id: str | None) -> Quiz | None:
    qid = parse_uuid(quiz_id)
    if qid is None:
        return None
    return db.query(Quiz).filter(Quiz.id == qid).first()


@router.post("/generate", response_model=QuizGenerateResponse)
def generate(
    data: QuizGenerateRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Generate a quiz of the requested type from the PDF's chunks.
    Every input check runs before the model is called; a PDF without chunks is a 400.
    """
    if not data.pdf_id or not data.quiz_type:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="PDF ID and quiz type are required")
    if not is_valid_quiz_type(data.quiz_type):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid quiz type")
    try:
        pid = parse_uuid(data.pdf_id)
        pdf = db.query(PDF).filter(PDF.id == pid, PDF.user_id == current_user.id).first() if pid else None
        if not pdf:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="PDF not found")
        content = pdf_content(db, pdf.id)
        if not content:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="PDF content not available for quiz generation",
            )
        quiz, questions = generate_quiz(db, pdf, data.quiz_type, current_user.id, content, data.title)
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.exception("Quiz generation error for pdf %s", data.pdf_id)
        raise internal_error("Failed to generate quiz", e)
    return QuizGenerateResponse(
        quiz=GeneratedQuiz(
            id=str(quiz.id),
            title=quiz.title,
            type=quiz.type,
            questions=questions,
            total_questions=len(questions),
        )
    )


@router.post("/attempt", response_model=QuizAttemptResponse)
def submit_attempt(
    data: QuizAttemptRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Grade {questionId: answer} against the stored key and record the attempt."""
    if not data.quiz_id or not isinstance(data.user_answers, dict):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Quiz ID and user answers are required")
    try:
        quiz = _get_quiz(db, data.quiz_id)
        if not quiz:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=QUIZ_NOT_FOUND)
        result = grade(load_json(quiz.questions, []), load_json(quiz.answers, []), data.user_answers)
        detailed = _detailed(result)
        attempt = QuizAttempt(
            quiz_id=quiz.id,
            user_id=current_user.id,
            user_answers=json.dumps(data.user_answers),
            score=result.score,
            total_questions=result.total_questions,
        )
        db.add(attempt)
        db.commit()
        db.refresh(attempt)
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.exception("Quiz attempt error for quiz %s", data.quiz_id)
        raise internal_error("Failed to submit quiz attempt", e)
    logger.info("quiz %s: attempt %s scored %s", quiz.id, attempt.id, result.score)
    return QuizAttemptResponse(
        attempt=AttemptResult(
            id=str(attempt.id),
            score=result.score,
            total_questions=result.total_questions,
            correct_count=result.correct_count,
            completed_at=attempt.completed_at,
            detailed_results=detailed,
        )
    )


@router.get("/recent", response_model=list[RecentQuizResponse])
def recent_quizzes(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Newest quizzes with their attempts (newest first)."""
    try:
        quizzes = (
            db.query(Quiz)
            .filter(Quiz.user_id == current_user.id)
            .order_by(Quiz.created_at.desc())
            .limit(settings.recent_quiz_limit)
            .all()
        )
        out = []
        for q in quizzes:
            attempts = (
                db.query(QuizAttempt)
                .filter(QuizAttempt.quiz_id == q.id)
                .order_by(QuizAttempt.completed_at.desc())
                .all()
            )
            out.append(RecentQuizResponse(
                id=str(q.id),
                title=q.title,
                type=q.type,
                total_questions=len(load_json(q.questions, [])),
                created_at=q.created_at,
                attempts=[
                    AttemptSummary(id=str(a.id), score=a.score, completed_at=a.completed_at)
                    for a in attempts
                ],
                pdf=PDFTitle(title=q.pdf.title) if q.pdf else None,
            ))
        return out
    except Exception as e:
        logger.exception("Error fetching recent quizzes")
        raise internal_error("Failed to fetch recent quizzes", e)


@router.get("/{quiz_id}", response_model=QuizDetailResponse)
def get_quiz(
    quiz_id: str,
    db: Session = Depends(get_db),
):
    try:
        quiz = _get_quiz(db, quiz_id)
        if not quiz:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=QUIZ_NOT_FOUND)
        questions = load_json(quiz.questions, [])
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Error fetching quiz %s", quiz_id)
        raise internal_error("Failed to fetch quiz", e)
    return QuizDetailResponse(
        id=str(quiz.id),
        title=quiz.title,
        type=quiz.type,
        questions=questions,
        total_questions=len(questions),
        pdf=PDFTitle(title=quiz.pdf.title) if quiz.pdf else None,
    )


@router.get("/{quiz_id}/results", response_model=AttemptResult)
def quiz_results(
    quiz_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Rebuild the latest attempt's per-question results from the stored quiz and submission.
    Absent answers render as empty strings.
    """
    try:
        qid = parse_uuid(quiz_id)
        attempt = None
        if qid is not None:
            attempt = (
                db.query(QuizAttempt)
                .filter(QuizAttempt.quiz_id == qid, QuizAttempt.user_id == current_user.id)
                .order_by(QuizAttempt.completed_at.desc())
                .first()
            )
        if not attempt:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No quiz attempts found")
        quiz = _get_quiz(db, quiz_id)
        if not quiz:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=QUIZ_NOT_FOUND)
        result = grade(
            load_json(quiz.questions, []),
            load_json(quiz.answers, []),
            load_json(attempt.user_answers, {}),
            fill_missing="",
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Error fetching results for quiz %s", quiz_id)
        raise internal_error("Failed to fetch quiz results", e)
    return AttemptResult(
        id=str(attempt.id),
        score=attempt.score,
        total_questions=attempt.total_questions,
        correct_count=result.correct_count,
        completed_at=attempt.completed_at,
        detailed_results=_detailed(result),
    )
