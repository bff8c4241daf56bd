"""
Progress: per-user, per-subject aggregates. Written by seed data only; read by the dashboard
for strengths/weaknesses (JSON lists).
"""
import uuid
from datetime import datetime
from sqlalchemy import String, Text, Integer, Float, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from beyondchats.database import Base
from beyondchats.models.types import UuidType, utcnow


class Progress(Base):
    __tablename__ = "progress"

    id: Mapped[uuid.UUID] = mapped_column(
        UuidType(), primary_key=True, default=uuid.uuid4
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UuidType(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    subject: Mapped[str] = mapped_column(String(255), nullable=False)
    total_quizzes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    completed_quizzes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    average_score: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    strengths: Mapped[str] = mapped_column(Text, nullable=False, default="[]")
    weaknesses: Mapped[str] = mapped_column(Text, nullable=False, default="[]")
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)
