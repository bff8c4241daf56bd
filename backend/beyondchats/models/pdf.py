"""
PDF: uploaded file metadata. PDFChunk: one text window of one page, created by processing.
Deleting a PDF deletes its chunks; chats and quizzes that reference it keep living with pdf_id NULL.
"""
import uuid
from datetime import datetime
from sqlalchemy import String, Text, BigInteger, Integer, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from beyondchats.database import Base
from beyondchats.models.types import UuidType, utcnow


class PDF(Base):
    __tablename__ = "pdfs"

    id: Mapped[uuid.UUID] = mapped_column(
        UuidType(), primary_key=True, default=uuid.uuid4
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UuidType(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(String(512), nullable=False)
    filename: Mapped[str] = mapped_column(String(512), nullable=False)
    file_path: Mapped[str] = mapped_column(String(1024), nullable=False)
    file_size: Mapped[int] = mapped_column(BigInteger, nullable=False)
    upload_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, index=True)

    user = relationship("User", back_populates="pdfs")
    chunks = relationship(
        "PDFChunk",
        back_populates="pdf",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="PDFChunk.page_number",
    )
    # No cascade: the ORM nulls pdf_id on these when the PDF goes away
    chats = relationship("Chat", back_populates="pdf")
    quizzes = relationship("Quiz", back_populates="pdf")


class PDFChunk(Base):
    __tablename__ = "pdf_chunks"

    id: Mapped[uuid.UUID] = mapped_column(
        UuidType(), primary_key=True, default=uuid.uuid4
    )
    pdf_id: Mapped[uuid.UUID] = mapped_column(
        UuidType(), ForeignKey("pdfs.id", ondelete="CASCADE"), nullable=False, index=True
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    page_number: Mapped[int] = mapped_column(Integer, nullable=False)

    pdf = relationship("PDF", back_populates="chunks")
