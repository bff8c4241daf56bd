"""
Quiz, attempt and result schemas. Question objects pass through as the model produced them.
"""
from datetime import datetime
from typing import Any

from beyondchats.schemas.common import CamelModel


class QuizGenerateRequest(CamelModel):
    pdf_id: str | None = None
    quiz_type: str | None = None  # MCQ | SAQ | LAQ | MIXED
    title: str | None = None


class GeneratedQuiz(CamelModel):
    id: str
    title: str
    type: str
    questions: list[dict]
    total_questions: int


class QuizGenerateResponse(CamelModel):
    success: bool = True
    quiz: GeneratedQuiz


class PDFTitle(CamelModel):
    title: str


class QuizDetailResponse(GeneratedQuiz):
    pdf: PDFTitle | None = None


class AttemptSummary(CamelModel):
    id: str
    score: int
    completed_at: datetime


class RecentQuizResponse(CamelModel):
    id: str
    title: str
    type: str
    total_questions: int
    created_at: datetime
    attempts: list[AttemptSummary]
    pdf: PDFTitle | None = None


class QuizAttemptRequest(CamelModel):
    quiz_id: str | None = None
    user_answers: Any = None  # {question_id: answer}; checked in the handler


class DetailedResult(CamelModel):
    question_id: str | None
    user_answer: Any = None
    correct_answer: Any = None
    is_correct: bool
    explanation: str = ""


class AttemptResult(CamelModel):
    id: str
    score: int
    total_questions: int
    correct_count: int
    completed_at: datetime
    detailed_results: list[DetailedResult]


class QuizAttemptResponse(CamelModel):
    success: bool = True
    attempt: AttemptResult
