"""
SQLAlchemy models. Import here so Alembic and the app can use them.
"""
from beyondchats.models.user import User
from beyondchats.models.pdf import PDF, PDFChunk
from beyondchats.models.chat import Chat, ChatMessage
from beyondchats.models.quiz import Quiz, QuizAttempt
from beyondchats.models.progress import Progress

__all__ = ["User", "PDF", "PDFChunk", "Chat", "ChatMessage", "Quiz", "QuizAttempt", "Progress"]
