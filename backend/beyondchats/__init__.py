"""BeyondChats: chat with your PDFs and take auto-graded quizzes."""

__version__ = "0.1.0"
