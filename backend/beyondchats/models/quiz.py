"""
Quiz: generated once from a PDF, read-only afterwards. questions and answers hold JSON strings.
QuizAttempt: one graded submission; user_answers holds the submitted {question_id: answer} as JSON.
"""
import uuid
from datetime import datetime
from sqlalchemy import String, Text, Integer, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from beyondchats.database import Base
from beyondchats.models.types import UuidType, utcnow

QUIZ_TYPES = ("MCQ", "SAQ", "LAQ", "MIXED")


class Quiz(Base):
    __tablename__ = "quizzes"

    id: Mapped[uuid.UUID] = mapped_column(
        UuidType(), primary_key=True, default=uuid.uuid4
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UuidType(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    pdf_id: Mapped[uuid.UUID | None] = mapped_column(
        UuidType(), ForeignKey("pdfs.id", ondelete="SET NULL"), nullable=True, index=True
    )
    title: Mapped[str] = mapped_column(String(512), nullable=False)
    type: Mapped[str] = mapped_column(String(10), nullable=False)
    questions: Mapped[str] = mapped_column(Text, nullable=False)  # JSON list of question objects
    answers: Mapped[str] = mapped_column(Text, nullable=False, default="[]")  # JSON list of {id, correctAnswer, explanation}
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, index=True)

    __table_args__ = (
        CheckConstraint("type IN ('MCQ', 'SAQ', 'LAQ', 'MIXED')", name="quizzes_type_check"),
    )

    user = relationship("User", back_populates="quizzes")
    pdf = relationship("PDF", back_populates="quizzes")
    attempts = relationship(
        "QuizAttempt",
        back_populates="quiz",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class QuizAttempt(Base):
    __tablename__ = "quiz_attempts"

    id: Mapped[uuid.UUID] = mapped_column(
        UuidType(), primary_key=True, default=uuid.uuid4
    )
    quiz_id: Mapped[uuid.UUID] = mapped_column(
        UuidType(), ForeignKey("quizzes.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UuidType(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_answers: Mapped[str] = mapped_column(Text, nullable=False)  # JSON object
    score: Mapped[int] = mapped_column(Integer, nullable=False)  # 0-100
    total_questions: Mapped[int] = mapped_column(Integer, nullable=False)
    completed_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, index=True)

    quiz = relationship("Quiz", back_populates="attempts")
