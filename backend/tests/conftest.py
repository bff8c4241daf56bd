"""
Shared fixtures: a throwaway SQLite database, a temp upload dir, a TestClient,
recording fake LLMs and a small PyMuPDF document factory.
The environment is set before beyondchats is imported so the engine binds to the temp database.
"""
import json
import os
import tempfile
import uuid
from pathlib import Path

_TMP_DIR = tempfile.mkdtemp(prefix="beyondchats-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{Path(_TMP_DIR) / 'test.db'}"
os.environ["LLM_PROVIDER"] = "openai"
os.environ["OPENAI_API_KEY"] = ""
os.environ["GEMINI_API_KEY"] = ""
os.environ["DEBUG"] = "false"

import pymupdf  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from beyondchats.config import settings  # noqa: E402
from beyondchats.database import Base, SessionLocal, engine, init_db  # noqa: E402
from beyondchats.main import app  # noqa: E402
from beyondchats.models.pdf import PDF, PDFChunk  # noqa: E402
from beyondchats.services import chat_service, quiz_generation  # noqa: E402

DEMO_USER_ID = uuid.UUID(settings.demo_user_id)


@pytest.fixture(autouse=True)
def fresh_db(tmp_path, monkeypatch):
    """Empty schema (plus demo user) and an isolated upload dir for every test."""
    monkeypatch.setattr(settings, "upload_dir", tmp_path / "uploads")
    Base.metadata.drop_all(bind=engine)
    init_db()
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


class FakeLLM:
    """Records every call; replies are fixed or raise the configured error."""

    def __init__(self, reply="Fake reply citing page 1.", quiz_questions=None, error=None):
        self.reply = reply
        self.quiz_questions = quiz_questions if quiz_questions is not None else [
            {"id": "q1", "question": "Q1?", "options": {"A": "a", "B": "b", "C": "c", "D": "d"},
             "correctAnswer": "C", "explanation": "Because C.", "difficulty": "Easy"},
            {"id": "q2", "question": "Q2?", "options": {"A": "a", "B": "b", "C": "c", "D": "d"},
             "correctAnswer": "C", "explanation": "Also C.", "difficulty": "Medium"},
        ]
        self.error = error
        self.chat_calls: list[list[dict]] = []
        self.quiz_calls: list[tuple[str, str, str]] = []

    def complete_chat(self, messages):
        self.chat_calls.append(messages)
        if self.error:
            raise self.error
        return self.reply

    def generate_quiz(self, system_prompt, user_content, quiz_type):
        self.quiz_calls.append((system_prompt, user_content, quiz_type))
        if self.error:
            raise self.error
        return json.dumps({"questions": self.quiz_questions})


@pytest.fixture
def fake_llm(monkeypatch):
    """Route chat and quiz generation to one FakeLLM instance."""
    fake = FakeLLM()
    monkeypatch.setattr(chat_service, "get_llm_service", lambda: fake)
    monkeypatch.setattr(quiz_generation, "get_llm_service", lambda: fake)
    return fake


def make_pdf_bytes(pages: list[str]) -> bytes:
    """Build a text PDF; each entry is one page, newlines start new lines."""
    doc = pymupdf.open()
    try:
        for text in pages:
            page = doc.new_page()
            page.insert_text((40, 50), text, fontsize=9)
        return doc.tobytes()
    finally:
        doc.close()


def word_lines(count: int, per_line: int = 10, word: str = "physics") -> str:
    """count words laid out per_line to a line so nothing runs off the page."""
    words = [f"{word}{i}" for i in range(count)]
    return "\n".join(" ".join(words[i:i + per_line]) for i in range(0, count, per_line))


@pytest.fixture
def pdf_factory():
    return make_pdf_bytes


@pytest.fixture(name="word_lines")
def word_lines_fixture():
    return word_lines


@pytest.fixture
def make_pdf_row(db):
    """Insert a PDF row for the demo user, optionally with chunks: [(page_number, content), ...]."""

    def _make(title="Sample PDF", chunks=None, file_path="/nonexistent/sample.pdf"):
        pdf = PDF(
            title=title,
            filename=f"{title}.pdf",
            file_path=file_path,
            file_size=1234,
            user_id=DEMO_USER_ID,
        )
        db.add(pdf)
        db.flush()
        for page_number, content in chunks or []:
            db.add(PDFChunk(pdf_id=pdf.id, page_number=page_number, content=content))
        db.commit()
        db.refresh(pdf)
        return pdf

    return _make
